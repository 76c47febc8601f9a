"""Ingredient normalization utilities."""

import functools
import re
from typing import Iterable, List, Optional

from .vocabulary import Vocabulary, load_default_vocabulary

# --- Constants ---

_PUNCTUATION = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")

# Unicode vulgar fractions (¼ ½ ¾ and ⅐ through ⅞)
_UNICODE_FRACTION = re.compile("[¼-¾⅐-⅞]")
_NUMBER = re.compile(r"\b\d+(?:\.\d+)?\b")

# --- Functions ---


def _word_pattern(words: Iterable[str]) -> Optional[re.Pattern]:
    """Compile a whole-word alternation for ``words``.

    Longer entries are tried first so that multi-word phrases such as
    "room temperature" win over any single word they contain. Spaces inside
    a phrase match any run of whitespace.
    """
    phrases = {" ".join(w.lower().split()) for w in words if w and w.strip()}
    if not phrases:
        return None
    alternatives = [
        r"\s+".join(re.escape(part) for part in phrase.split())
        for phrase in sorted(phrases, key=lambda p: (-len(p), p))
    ]
    return re.compile(r"\b(?:" + "|".join(alternatives) + r")\b")


class IngredientNormalizer:
    """Turns free-text ingredient phrases into canonical comparison keys.

    The pipeline lowercases the text, replaces punctuation with spaces, then
    strips preparation words, units, size descriptors, numbers and quantity
    nouns as whole words before collapsing whitespace. Stripping is repeated
    until nothing more is removed, so a phrase split by a stripped token
    (e.g. "room 2 temperature") is still recognised and normalizing a key a
    second time never changes it.

    Args:
        vocabulary: Word lists to strip. Defaults to the bundled vocabulary.
    """

    def __init__(self, vocabulary: Optional[Vocabulary] = None):
        self.vocabulary = vocabulary or load_default_vocabulary()
        patterns = [
            _word_pattern(self.vocabulary.prep_words),
            _word_pattern(self.vocabulary.units),
            _word_pattern(self.vocabulary.size_words),
            _UNICODE_FRACTION,
            _NUMBER,
            _word_pattern(self.vocabulary.quantity_words),
        ]
        self._strip_patterns: List[re.Pattern] = [p for p in patterns if p is not None]

    def normalize(self, text: str) -> str:
        """Normalize ingredient text for consistent matching.

        Args:
            text: Raw ingredient text, e.g. "2 cups diced yellow onion".

        Returns:
            The normalized key ("yellow onion"). May be empty when every
            token is stripped; an empty key never matches a pantry entry.

        Examples:
            >>> IngredientNormalizer().normalize("2 lbs boneless chicken breast, diced")
            'boneless chicken breast'
            >>> IngredientNormalizer().normalize("3 cloves garlic, minced")
            'garlic'
        """
        if not text:
            return ""

        key = _PUNCTUATION.sub(" ", str(text).lower())
        while True:
            stripped = key
            for pattern in self._strip_patterns:
                stripped = pattern.sub(" ", stripped)
            stripped = _WHITESPACE.sub(" ", stripped).strip()
            if stripped == key:
                return key
            key = stripped

    __call__ = normalize


@functools.lru_cache(maxsize=None)
def default_normalizer() -> IngredientNormalizer:
    """Return a shared normalizer built on the bundled vocabulary."""
    return IngredientNormalizer()


def normalize_ingredient_name(text: str) -> str:
    """Normalize ``text`` with the bundled vocabulary.

    Examples:
        >>> normalize_ingredient_name("1 large egg, room temperature")
        'egg'
    """
    return default_normalizer().normalize(text)
