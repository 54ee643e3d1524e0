"""nidctl — parse, validate, and derive data from national identification numbers."""

__version__ = "0.1.0"
