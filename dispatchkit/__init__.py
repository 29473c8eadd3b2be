"""Dispatch time values, object type tags, queue width resolution and timer schedules."""

__version__ = "0.1.0"
__all__ = ["clock", "hardware", "objects", "sources"]