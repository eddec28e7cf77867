"""Museum collection items: paintings, sculptures and artifacts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


@dataclass
class MuseumItem(ABC):
    """Anything a museum can show, identified by title and year."""

    title: str
    year: int

    visit_minutes: ClassVar[int]

    @abstractmethod
    def describe(self) -> str:
        """Return a one-line description of the item."""


@dataclass
class Exhibit(MuseumItem):
    """An item with an author that is placed in a numbered hall."""

    author: str
    hall_number: int


@dataclass
class Painting(Exhibit):
    """A painting, with the technique it was made in."""

    technique: str

    visit_minutes: ClassVar[int] = 15

    def describe(self) -> str:
        return (
            f"Картина: {self.title}, художник: {self.author}, год: {self.year}, "
            f"техника: {self.technique}, зал: {self.hall_number}"
        )


@dataclass
class Sculpture(Exhibit):
    """A sculpture, with the material it is made of."""

    material: str

    visit_minutes: ClassVar[int] = 12

    def describe(self) -> str:
        return (
            f"Скульптура: {self.title}, автор: {self.author}, год: {self.year}, "
            f"материал: {self.material}, зал: {self.hall_number}"
        )


@dataclass
class Artifact(Exhibit):
    """A historical artifact; the author field holds its origin."""

    epoch: str

    visit_minutes: ClassVar[int] = 10

    def describe(self) -> str:
        return (
            f"Артефакт: {self.title}, происхождение: {self.author}, "
            f"датировка: {self.year}, эпоха: {self.epoch}, зал: {self.hall_number}"
        )