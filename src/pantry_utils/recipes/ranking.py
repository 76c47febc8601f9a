"""Rank recipes by how much of each a pantry covers."""

from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ..ingredients.compatibility import calculate_recipe_compatibility
from ..ingredients.models import RecipeCompatibility

# recipe id -> ingredient lines, or (recipe id, ingredient lines) pairs
Recipes = Union[Mapping[str, Sequence[str]], Iterable[Tuple[str, Sequence[str]]]]


def analyze_recipes(matcher, recipes: Recipes) -> List[RecipeCompatibility]:
    """Calculate compatibility for many recipes, best covered first.

    Args:
        matcher: IngredientMatcher built from the user's pantry.
        recipes: Recipe id to ingredient lines, as a mapping or as pairs.

    Returns:
        One RecipeCompatibility per recipe, sorted by compatibility score
        descending. Recipes with equal scores keep their input order.
    """
    items = recipes.items() if isinstance(recipes, Mapping) else recipes
    results = [
        calculate_recipe_compatibility(matcher, ingredients, recipe_id=recipe_id)
        for recipe_id, ingredients in items
    ]
    return sorted(results, key=lambda r: r.compatibility_score, reverse=True)


def filter_recipes(
    results: Iterable[RecipeCompatibility],
    min_compatibility: int = 0,
    max_missing: Optional[int] = None,
) -> List[RecipeCompatibility]:
    """Keep results that reach ``min_compatibility`` and miss at most ``max_missing`` lines."""
    return [
        r
        for r in results
        if r.compatibility_score >= min_compatibility
        and (max_missing is None or len(r.missing_ingredients) <= max_missing)
    ]
