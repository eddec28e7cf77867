"""The museum: halls, a collection and a catalog to search it."""

from __future__ import annotations

from dataclasses import dataclass, field

from .catalog import Catalog
from .hall import Hall
from .items import MuseumItem


@dataclass
class Museum:
    """A museum that owns its halls and shares its items."""

    name: str
    halls: list[Hall] = field(default_factory=list)
    items: list[MuseumItem] = field(default_factory=list)
    catalog: Catalog = field(default_factory=Catalog, repr=False, compare=False)

    def add_hall(self, number: int, name: str) -> Hall:
        """Create a hall in this museum and return it."""
        hall = Hall(number, name)
        self.halls.append(hall)
        return hall

    def add_item(self, item: MuseumItem) -> None:
        """Add an item to the collection."""
        self.items.append(item)

    def format_info(self) -> str:
        """Return the museum's name and counts."""
        return "\n".join(
            [
                f"Музей: {self.name}",
                f"Количество залов: {len(self.halls)}",
                f"Количество экспонатов: {len(self.items)}",
            ]
        )

    def format_halls(self) -> str:
        """Return the list of halls."""
        lines = [f'Залы музея "{self.name}":']
        if not self.halls:
            lines.append("Залы пока не добавлены.")
        else:
            lines.extend(hall.describe() for hall in self.halls)
        return "\n".join(lines)

    def format_collection(self) -> str:
        """Return the list of items in the collection."""
        lines = [f'Экспонаты музея "{self.name}":']
        if not self.items:
            lines.append("Коллекция пока пуста.")
        else:
            lines.extend(item.describe() for item in self.items)
        return "\n".join(lines)

    def format_visit_plan(self) -> str:
        """Return each item's title with its recommended viewing time."""
        lines = [f'План осмотра музея "{self.name}":']
        if not self.items:
            lines.append("План осмотра пока невозможно составить.")
        else:
            lines.extend(f"- {item.title}: {item.visit_minutes} мин." for item in self.items)
        return "\n".join(lines)

    def find_item(self, title: str) -> MuseumItem | None:
        """Look an item up by title through the catalog."""
        return self.catalog.find_by_title(self.items, title)