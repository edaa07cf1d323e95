"""Primitives for time-stamped sensor streams: errors, constants, message layouts, a ring buffer and sample records."""

__version__ = "1.0.6"

__all__ = ["constants", "errors", "messages", "ringbuffer", "sensortypes"]