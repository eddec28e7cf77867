"""A small model of a museum with halls, exhibits, a catalog, guides and visitors."""

__version__ = "0.1.0"
__all__ = ["items", "hall", "catalog", "guide", "visitor", "museum", "cli"]