"""Settings, text sanitising, anchors, comment extraction and section assembly for module documentation."""

__version__ = "0.1.0"

__all__ = ["anchor", "generator", "lines", "sanitizer", "settings"]