"""Font properties, outlines and CSS-style font matching over font sources."""

__version__ = "0.1.0"
__all__ = ["errors", "matching", "metrics", "multi", "outline", "properties", "source", "utils"]