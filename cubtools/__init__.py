"""XPM texture decoding, X11 colour names, map and colour checks, and C-style string, byte and output helpers."""

__version__ = "0.1.0"