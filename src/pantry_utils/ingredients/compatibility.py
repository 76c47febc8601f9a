"""Aggregate per-ingredient matches into recipe-level scores."""

import logging
from typing import Optional, Sequence

from .models import RecipeCompatibility
from .number_utils import percentage, round_half_up

logger = logging.getLogger(__name__)


def calculate_recipe_compatibility(
    matcher, recipe_ingredients: Sequence[str], recipe_id: Optional[str] = None
) -> RecipeCompatibility:
    """Calculate how well a pantry covers a recipe.

    Every ingredient line is matched independently. Lines with any match
    count as available regardless of confidence.

    Args:
        matcher: Object with a ``match_ingredient(text)`` method, normally an
            IngredientMatcher.
        recipe_ingredients: The recipe's ingredient lines, in order.
        recipe_id: Optional identifier carried through to the result.

    Returns:
        RecipeCompatibility where ``compatibility_score`` is the rounded
        percentage of lines matched and ``confidence_score`` the rounded mean
        confidence of the available matches. Both are 0 for an empty recipe.
    """
    matches = [matcher.match_ingredient(ingredient) for ingredient in recipe_ingredients]
    available = [m for m in matches if m.is_match]
    missing = [m for m in matches if not m.is_match]

    confidence_score = 0
    if available:
        confidence_score = round_half_up(sum(m.confidence for m in available) / len(available))

    compatibility = RecipeCompatibility(
        total_ingredients=len(matches),
        available_ingredients=available,
        missing_ingredients=missing,
        compatibility_score=percentage(len(available), len(matches)),
        confidence_score=confidence_score,
        recipe_id=recipe_id,
    )
    logger.debug(
        f"Recipe {recipe_id or '<unnamed>'}: {len(available)}/{len(matches)} ingredients "
        f"available ({compatibility.compatibility_score}%)"
    )
    return compatibility
