import dataclasses
from typing import List, Optional, Tuple

EXACT = "exact"
PARTIAL = "partial"
FUZZY = "fuzzy"
NONE = "none"

MATCH_TYPES = (EXACT, PARTIAL, FUZZY, NONE)


@dataclasses.dataclass(frozen=True)
class PantryEntry:
    normalized: str
    original: str  # pantry name as the user entered it
    categories: Tuple[str, ...]  # first category seen comes first

    @property
    def category(self) -> str:
        return self.categories[0]


@dataclasses.dataclass(frozen=True)
class IngredientMatch:
    recipe_ingredient: str
    matched_ingredient: Optional[str] = None
    matched_category: Optional[str] = None
    confidence: int = 0  # 0-100
    match_type: str = NONE  # 'exact', 'partial', 'fuzzy', 'none'

    @classmethod
    def no_match(cls, recipe_ingredient: str) -> "IngredientMatch":
        return cls(recipe_ingredient=recipe_ingredient)

    @property
    def is_match(self) -> bool:
        return self.match_type != NONE


@dataclasses.dataclass
class RecipeCompatibility:
    total_ingredients: int
    available_ingredients: List[IngredientMatch]
    missing_ingredients: List[IngredientMatch]
    compatibility_score: int  # percentage of ingredients matched
    confidence_score: int  # mean confidence of available matches
    recipe_id: Optional[str] = None

    @property
    def available_ingredient_names(self) -> List[str]:
        return [m.recipe_ingredient for m in self.available_ingredients]

    @property
    def missing_ingredient_names(self) -> List[str]:
        return [m.recipe_ingredient for m in self.missing_ingredients]
