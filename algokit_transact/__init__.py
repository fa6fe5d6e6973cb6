"""Build, encode, decode and identify Algorand payment and asset transfer transactions."""

__version__ = "0.1.0"