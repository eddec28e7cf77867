"""Museum visitors."""

from __future__ import annotations

from dataclasses import dataclass

from .guide import Guide


@dataclass
class Visitor:
    """A visitor who may be accompanied by a guide."""

    name: str
    guide: Guide | None = None

    def ask_guide_name(self) -> str:
        """Return a sentence about the visitor's guide, if any."""
        if self.guide is not None:
            return f"Посетитель {self.name} общается с гидом {self.guide.name}"
        return f"У посетителя {self.name} пока нет гида"