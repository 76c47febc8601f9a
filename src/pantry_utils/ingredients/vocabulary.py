"""Word lists and synonym table used to normalize and match ingredients."""

import dataclasses
import functools
import json
import os
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

DEFAULT_VOCABULARY_FILE = os.path.join(
    os.path.dirname(__file__), "data", "vocabulary.json"
)

_WORD_LIST_SECTIONS = ("prep_words", "units", "size_words", "quantity_words")


@dataclasses.dataclass(frozen=True)
class Vocabulary:
    """Immutable lookup tables for the normalizer and the fuzzy matcher.

    Attributes:
        prep_words: Preparation and state adjectives ("diced", "room temperature").
        units: Measurement unit tokens and their spelling variants.
        size_words: Size descriptors and approximations ("large", "about").
        quantity_words: Count nouns ("slices", "cloves").
        synonyms: Canonical term mapped to the variant names it may stand for.
    """

    prep_words: Tuple[str, ...]
    units: Tuple[str, ...]
    size_words: Tuple[str, ...]
    quantity_words: Tuple[str, ...]
    synonyms: Mapping[str, Tuple[str, ...]] = dataclasses.field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self):
        # Accept lists and dicts from callers but store immutable copies.
        for name in _WORD_LIST_SECTIONS:
            object.__setattr__(self, name, tuple(getattr(self, name)))
        object.__setattr__(
            self,
            "synonyms",
            MappingProxyType(
                {term.lower(): tuple(variants) for term, variants in self.synonyms.items()}
            ),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "Vocabulary":
        """Build a vocabulary from a JSON-style mapping.

        Args:
            data: Mapping with one list per word-list section and an optional
                ``synonyms`` mapping of term to list of variants.

        Returns:
            A new Vocabulary.

        Raises:
            ValueError: If a word-list section is missing or not a list.
        """
        sections: Dict[str, List[str]] = {}
        for name in _WORD_LIST_SECTIONS:
            values = data.get(name)
            if not isinstance(values, list):
                raise ValueError(f"Vocabulary section '{name}' must be a list")
            sections[name] = [str(value).lower() for value in values]

        synonyms = data.get("synonyms", {})
        if not isinstance(synonyms, dict):
            raise ValueError("Vocabulary section 'synonyms' must be a mapping")

        return cls(
            synonyms={term: _as_strings(variants) for term, variants in synonyms.items()},
            **sections,
        )

    @classmethod
    def from_json(cls, path: str) -> "Vocabulary":
        """Load a vocabulary from a JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def synonyms_for(self, word: str) -> Tuple[str, ...]:
        """Return the synonym variants registered for ``word`` (empty if none)."""
        return self.synonyms.get(word, ())


def _as_strings(values: Iterable[object]) -> List[str]:
    if isinstance(values, str):
        return [values]
    return [str(value) for value in values]


@functools.lru_cache(maxsize=None)
def load_default_vocabulary() -> Vocabulary:
    """Return the vocabulary bundled with the package (loaded once)."""
    return Vocabulary.from_json(DEFAULT_VOCABULARY_FILE)
