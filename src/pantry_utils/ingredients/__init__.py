"""Ingredient normalization and pantry matching utilities."""

from .compatibility import calculate_recipe_compatibility
from .matching import IngredientMatcher, MatchingConfig
from .models import (
    EXACT,
    FUZZY,
    MATCH_TYPES,
    NONE,
    PARTIAL,
    IngredientMatch,
    PantryEntry,
    RecipeCompatibility,
)
from .normalization import IngredientNormalizer, normalize_ingredient_name
from .pantry import PantryIndex, generate_variants
from .vocabulary import Vocabulary, load_default_vocabulary

__all__ = [
    "normalize_ingredient_name",
    "IngredientNormalizer",
    "Vocabulary",
    "load_default_vocabulary",
    "PantryIndex",
    "generate_variants",
    "IngredientMatcher",
    "MatchingConfig",
    "calculate_recipe_compatibility",
    "IngredientMatch",
    "PantryEntry",
    "RecipeCompatibility",
    "EXACT",
    "PARTIAL",
    "FUZZY",
    "NONE",
    "MATCH_TYPES",
]
