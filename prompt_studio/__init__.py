"""Prompt studio: prompt library, composition and combination storage."""

__version__ = "1.0.0"
