"""Tour guides and their routes."""

from __future__ import annotations

from dataclasses import dataclass, field

from .items import MuseumItem


@dataclass
class Guide:
    """A guide with an ordered route through museum items."""

    name: str
    route: list[MuseumItem] = field(default_factory=list)

    def add_to_route(self, item: MuseumItem) -> None:
        """Append an item as the next stop of the route."""
        self.route.append(item)

    def format_route(self) -> str:
        """Return the route as text, one stop after another."""
        lines = [f"Маршрут гида {self.name}:"]
        if not self.route:
            lines.append("  Маршрут пока не составлен.")
            return "\n".join(lines)
        for stop, item in enumerate(self.route, start=1):
            lines.append(f"Остановка {stop}:")
            lines.append(item.describe())
            lines.append(f"  Рекомендуемое время осмотра: {item.visit_minutes} мин.")
        return "\n".join(lines)