"""Array and string algorithms built on two-pointer and sliding-window techniques."""

__version__ = "0.1.0"
__all__ = ["inplace", "ksum", "stocks", "text", "water"]