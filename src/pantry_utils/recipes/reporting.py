"""Load pantry and recipe files and tabulate compatibility results."""

import json
from typing import Dict, Iterable, List

import pandas as pd

from ..ingredients.models import RecipeCompatibility

REPORT_COLUMNS = [
    "recipe_id",
    "total_ingredients",
    "available_count",
    "missing_count",
    "compatibility_score",
    "confidence_score",
    "missing_ingredients",
]


def load_pantry(path: str) -> Dict[str, List[str]]:
    """Load a pantry JSON file mapping category names to ingredient lists.

    Raises:
        ValueError: If the file is not a mapping of names to string lists.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Pantry file {path} must contain a JSON object")
    pantry = {}
    for category, names in data.items():
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ValueError(f"Pantry category '{category}' must be a list of strings")
        pantry[str(category)] = names
    return pantry


def load_recipes(path: str) -> Dict[str, List[str]]:
    """Load recipes from JSON.

    Two layouts are accepted: an object mapping recipe id to ingredient
    lines, or a list of objects with ``id`` and ``ingredients`` keys.

    Raises:
        ValueError: If neither layout matches.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        items = list(data.items())
    elif isinstance(data, list):
        try:
            items = [(recipe["id"], recipe["ingredients"]) for recipe in data]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Recipe entries in {path} need 'id' and 'ingredients': {e}") from e
    else:
        raise ValueError(f"Recipe file {path} must contain a JSON object or list")

    recipes = {}
    for recipe_id, ingredients in items:
        if not isinstance(ingredients, list):
            raise ValueError(f"Ingredients of recipe '{recipe_id}' must be a list")
        recipes[str(recipe_id)] = [str(i) for i in ingredients]
    return recipes


def compatibility_dataframe(results: Iterable[RecipeCompatibility]) -> pd.DataFrame:
    """Tabulate compatibility results, one row per recipe in input order."""
    rows = [
        {
            "recipe_id": r.recipe_id,
            "total_ingredients": r.total_ingredients,
            "available_count": len(r.available_ingredients),
            "missing_count": len(r.missing_ingredients),
            "compatibility_score": r.compatibility_score,
            "confidence_score": r.confidence_score,
            "missing_ingredients": "; ".join(r.missing_ingredient_names),
        }
        for r in results
    ]
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def match_dataframe(results: Iterable[RecipeCompatibility]) -> pd.DataFrame:
    """One row per recipe ingredient line with its match details."""
    rows = []
    for r in results:
        for match in r.available_ingredients + r.missing_ingredients:
            rows.append(
                {
                    "recipe_id": r.recipe_id,
                    "recipe_ingredient": match.recipe_ingredient,
                    "matched_ingredient": match.matched_ingredient,
                    "matched_category": match.matched_category,
                    "confidence": match.confidence,
                    "match_type": match.match_type,
                }
            )
    return pd.DataFrame(
        rows,
        columns=[
            "recipe_id",
            "recipe_ingredient",
            "matched_ingredient",
            "matched_category",
            "confidence",
            "match_type",
        ],
    )
