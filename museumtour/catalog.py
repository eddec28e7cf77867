"""Title lookup over a museum collection."""

from __future__ import annotations

from collections.abc import Iterable

from .items import MuseumItem


class Catalog:
    """Finds items of a collection by title."""

    def find_by_title(self, items: Iterable[MuseumItem], title: str) -> MuseumItem | None:
        """Return the first item with exactly this title, or None."""
        return next((item for item in items if item.title == title), None)