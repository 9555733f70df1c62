"""Subtitle and sound-caption toolkit: timing, line breaking, direction tracking, layout and styling."""

__version__ = "0.1.0"
__all__ = ["models", "tools", "tracking", "settings", "sources", "styles"]