"""Data models for a virtual on-screen keyboard: keys, layouts, text, word candidates and styles."""

__version__ = "0.1.0"