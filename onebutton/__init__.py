"""Detect clicks, double clicks, multi clicks and long presses on a single button."""

__version__ = "0.1.0"
__all__ = ["button", "tiny"]