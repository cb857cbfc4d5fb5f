"""Routes package for the message board."""

from .pages import pages_bp

__all__ = ["pages_bp"]
