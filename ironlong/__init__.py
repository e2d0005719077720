"""A tile-based collect-and-escape puzzle game, with map loading and validation, a pygame front end, and small string, byte-buffer and line-reading helpers."""

__version__ = "1.0.0"