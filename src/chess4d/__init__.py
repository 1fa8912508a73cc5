"""chess4d — rules engine for chess on a 4x4x4x4 board."""

__version__ = "0.1.0"
