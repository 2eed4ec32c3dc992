"""Arbitrary-precision integer calculator working on decimal digit lists."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "cli", "digits"]