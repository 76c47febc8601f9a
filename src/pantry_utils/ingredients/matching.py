"""Match recipe ingredient lines against a user's pantry."""

import dataclasses
import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .compatibility import calculate_recipe_compatibility
from .models import EXACT, FUZZY, PARTIAL, IngredientMatch, PantryEntry, RecipeCompatibility
from .normalization import IngredientNormalizer, default_normalizer
from .number_utils import percentage
from .pantry import Pantry, PantryIndex
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)

_Candidate = Tuple[PantryEntry, int]


@dataclasses.dataclass(frozen=True)
class MatchingConfig:
    """Tuning constants for the confidence heuristics.

    The defaults are the values the matcher has always used; they are
    heuristics, not derived quantities.
    """

    exact_confidence: int = 100
    # partial candidates below this are rejected
    min_partial_confidence: int = 30
    # shorter recipe words are ignored by word matching
    significant_word_length: int = 3
    # strictly more than this share of significant words must match
    word_majority_ratio: float = 0.5
    # substring containment
    short_key_length: int = 8
    contains_boost: int = 20
    contains_short_cap: int = 85
    contains_cap: int = 80
    # word overlap
    single_word_boost: int = 15
    word_match_cap: int = 75
    whole_word_boost: int = 10
    whole_word_cap: int = 80
    # synonyms
    fuzzy_penalty: int = 10
    fuzzy_floor: int = 40

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MatchingConfig":
        """Build a config from a mapping of overrides.

        Raises:
            ValueError: If ``data`` names a setting that does not exist.
        """
        fields = {f.name: f for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - set(fields))
        if unknown:
            raise ValueError(f"Unknown matching settings: {', '.join(unknown)}")
        overrides = {}
        for name, value in data.items():
            default = fields[name].default
            overrides[name] = float(value) if isinstance(default, float) else int(value)
        return cls(**overrides)

    @classmethod
    def from_json(cls, path: str) -> "MatchingConfig":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))


def _singular(word: str) -> str:
    if word.endswith("s") and len(word) > 3:
        return word[:-1]
    return word


class IngredientMatcher:
    """Decides whether recipe ingredients are covered by a user's pantry.

    The pantry is indexed once at construction. Each recipe line is then
    normalized and tried against the index with three strategies, in order,
    stopping at the first that succeeds:

    1. exact: the normalized line is an index key (confidence 100).
    2. partial: the line contains an index key, or a majority of its
       significant words occur in one. The best scoring key wins, ties go
       to the key registered first, and scores under 30 are rejected.
    3. fuzzy: synonyms of the line's words are tried with the partial
       strategy; the first hit is used with a reduced confidence.

    Lines that match nothing yield a ``none`` match. Matching never raises.

    Attributes:
        index (PantryIndex): Normalized pantry lookup built from the pantry.
        config (MatchingConfig): Confidence heuristics in use.
        normalizer (IngredientNormalizer): Normalizer shared by index and lookups.
    """

    def __init__(
        self,
        pantry: Pantry,
        vocabulary: Optional[Vocabulary] = None,
        config: Optional[MatchingConfig] = None,
    ):
        """Initialize the matcher.

        Args:
            pantry: Mapping of category name to the ingredient names in it.
            vocabulary: Word lists and synonyms. Defaults to the bundled set.
            config: Confidence heuristics. Defaults to MatchingConfig().
        """
        self.config = config or MatchingConfig()
        self.normalizer = (
            IngredientNormalizer(vocabulary) if vocabulary is not None else default_normalizer()
        )
        self.index = PantryIndex.build(pantry, self.normalizer)
        self._synonyms: Dict[str, Tuple[str, ...]] = {}
        for term, variants in self.normalizer.vocabulary.synonyms.items():
            normalized = (self.normalizer.normalize(v) for v in variants)
            self._synonyms[term] = tuple(dict.fromkeys(v for v in normalized if v))

    @property
    def pantry_size(self) -> int:
        """Number of ingredient names supplied, counted across categories."""
        return self.index.pantry_size

    def normalize_name(self, ingredient: str) -> str:
        return self.normalizer.normalize(ingredient)

    def has_ingredient(self, ingredient: str, min_confidence: int = 0) -> bool:
        """Return True if ``ingredient`` matches the pantry.

        Args:
            ingredient: Recipe ingredient text.
            min_confidence: Optional minimum confidence the match must reach.
        """
        match = self.match_ingredient(ingredient)
        return match.is_match and match.confidence >= min_confidence

    def match_ingredient(self, recipe_ingredient: str) -> IngredientMatch:
        """Match a single recipe ingredient against the pantry.

        Args:
            recipe_ingredient: Free-text ingredient line, e.g. "2 cups diced onion".

        Returns:
            IngredientMatch describing the best pantry item, its first
            category, the confidence and the strategy that found it.
        """
        key = self.normalizer.normalize(recipe_ingredient)

        entry = self.index.get(key) if key else None
        if entry is not None:
            return self._result(recipe_ingredient, entry, self.config.exact_confidence, EXACT)

        candidate = self._find_partial_match(key)
        if candidate is not None:
            return self._result(recipe_ingredient, *candidate, PARTIAL)

        candidate = self._find_fuzzy_match(key)
        if candidate is not None:
            return self._result(recipe_ingredient, *candidate, FUZZY)

        logger.debug(f"No pantry match for {recipe_ingredient!r} (key {key!r})")
        return IngredientMatch.no_match(recipe_ingredient)

    def calculate_recipe_compatibility(
        self, recipe_ingredients: Sequence[str], recipe_id: Optional[str] = None
    ) -> RecipeCompatibility:
        """Score how much of a recipe the pantry covers.

        See :func:`pantry_utils.ingredients.compatibility.calculate_recipe_compatibility`.
        """
        return calculate_recipe_compatibility(self, recipe_ingredients, recipe_id=recipe_id)

    def _result(
        self, recipe_ingredient: str, entry: PantryEntry, confidence: int, match_type: str
    ) -> IngredientMatch:
        logger.debug(
            f"{match_type} match for {recipe_ingredient!r}: "
            f"{entry.original!r} in {entry.category!r} ({confidence})"
        )
        return IngredientMatch(
            recipe_ingredient=recipe_ingredient,
            matched_ingredient=entry.original,
            matched_category=entry.category,
            confidence=confidence,
            match_type=match_type,
        )

    def _find_partial_match(self, key: str) -> Optional[_Candidate]:
        """Scan the whole index for the best containment or word-overlap match."""
        words = [w for w in key.split() if len(w) >= self.config.significant_word_length]
        best: Optional[_Candidate] = None

        for pantry_key, entry in self.index.items():
            if pantry_key in key:
                confidence = self._contains_confidence(key, pantry_key)
                if best is None or confidence > best[1]:
                    best = (entry, confidence)

            matching_words = [w for w in words if w in pantry_key]
            if matching_words and len(matching_words) > len(words) * self.config.word_majority_ratio:
                confidence = self._word_match_confidence(words, matching_words, pantry_key)
                if best is None or confidence > best[1]:
                    best = (entry, confidence)

        if best is not None and best[1] >= self.config.min_partial_confidence:
            return best
        return None

    def _find_fuzzy_match(self, key: str) -> Optional[_Candidate]:
        for synonym in self._synonym_candidates(key):
            candidate = self._find_partial_match(synonym)
            if candidate is not None:
                entry, confidence = candidate
                confidence = max(confidence - self.config.fuzzy_penalty, self.config.fuzzy_floor)
                return entry, confidence
        return None

    def _synonym_candidates(self, key: str) -> List[str]:
        """Synonym strings for every word of ``key`` that has table entries."""
        candidates: Dict[str, None] = {}
        for word in key.split():
            for term in dict.fromkeys((word, _singular(word))):
                for synonym in self._synonyms.get(term, ()):
                    if synonym != key:
                        candidates[synonym] = None
        return list(candidates)

    def _contains_confidence(self, key: str, pantry_key: str) -> int:
        """Confidence that ``key`` refers to the pantry key it contains.

        Based on how much of the recipe text the pantry key covers, with a
        boost for short single-word pantry keys such as "salt" or "butter".
        """
        confidence = percentage(len(pantry_key), len(key))
        if len(pantry_key) <= self.config.short_key_length and " " not in pantry_key:
            return min(confidence + self.config.contains_boost, self.config.contains_short_cap)
        return min(confidence, self.config.contains_cap)

    def _word_match_confidence(
        self, words: List[str], matching_words: List[str], pantry_key: str
    ) -> int:
        """Confidence from the share of recipe words found in the pantry key."""
        confidence = percentage(len(matching_words), len(words))
        if len(matching_words) == 1 and " " not in pantry_key:
            confidence = min(confidence + self.config.single_word_boost, self.config.word_match_cap)
        else:
            confidence = min(confidence, self.config.word_match_cap)

        pantry_words = pantry_key.split()
        if all(w in pantry_words for w in matching_words):
            confidence = min(confidence + self.config.whole_word_boost, self.config.whole_word_cap)
        return confidence
