"""Recipe ranking and reporting built on ingredient matching."""

from .ranking import analyze_recipes, filter_recipes
from .reporting import (
    compatibility_dataframe,
    load_pantry,
    load_recipes,
    match_dataframe,
)

__all__ = [
    "analyze_recipes",
    "filter_recipes",
    "compatibility_dataframe",
    "match_dataframe",
    "load_pantry",
    "load_recipes",
]
