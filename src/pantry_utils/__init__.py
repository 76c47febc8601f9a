"""Pantry Utils - Matching recipe ingredients against a user's pantry."""

__version__ = "0.1.0"

from . import ingredients, recipes

__all__ = ["ingredients", "recipes"]
