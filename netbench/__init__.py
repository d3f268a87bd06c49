"""Closed-loop TCP benchmark client with length-prefixed framing helpers."""

__version__ = "0.1.0"
__all__ = ["client", "framing"]