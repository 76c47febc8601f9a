"""Normalized lookup index over a user's categorized pantry."""

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from .models import PantryEntry
from .normalization import IngredientNormalizer, default_normalizer

logger = logging.getLogger(__name__)

# category -> ingredient names as entered by the user
Pantry = Mapping[str, Sequence[str]]


def generate_variants(key: str) -> List[str]:
    """Return naive alternative spellings of a normalized key.

    The trailing "s" is toggled (dropped from keys longer than three
    characters, added to keys without one) and, for multi-word keys, a
    space-free form is added.

    Examples:
        >>> generate_variants("chicken breast")
        ['chicken breasts', 'chickenbreast']
        >>> generate_variants("eggs")
        ['egg']
    """
    variants = []
    if key.endswith("s"):
        if len(key) > 3:
            variants.append(key[:-1])
    else:
        variants.append(key + "s")
    if " " in key:
        variants.append(key.replace(" ", ""))
    return variants


class PantryIndex:
    """Immutable mapping of normalized keys to pantry entries.

    Every pantry name is registered under its normalized key and under the
    keys of its generated variants. The first name registered for a key is
    kept as its original; later registrations of the same key only add
    their category. Iteration follows registration order, which is what
    breaks confidence ties during partial matching.
    """

    def __init__(self, entries: Mapping[str, PantryEntry], pantry_size: int = 0):
        self._entries = MappingProxyType(dict(entries))
        self.pantry_size = pantry_size

    @classmethod
    def build(
        cls, pantry: Pantry, normalizer: Optional[IngredientNormalizer] = None
    ) -> "PantryIndex":
        """Build an index from a category -> ingredient names mapping."""
        normalizer = normalizer or default_normalizer()
        originals: Dict[str, str] = {}
        categories: Dict[str, List[str]] = {}
        pantry_size = 0

        def register(key: str, original: str, category: str) -> None:
            if key not in originals:
                originals[key] = original
                categories[key] = [category]
            elif category not in categories[key]:
                categories[key].append(category)

        for category, names in pantry.items():
            for name in names:
                pantry_size += 1
                key = normalizer.normalize(name)
                if not key:
                    logger.debug(f"Skipping pantry item {name!r} in {category!r}: empty key")
                    continue
                register(key, name, category)
                for variant in generate_variants(key):
                    variant_key = normalizer.normalize(variant)
                    if variant_key:
                        register(variant_key, name, category)

        entries = {
            key: PantryEntry(
                normalized=key,
                original=originals[key],
                categories=tuple(categories[key]),
            )
            for key in originals
        }
        logger.debug(f"Built pantry index with {len(entries)} keys from {pantry_size} items")
        return cls(entries, pantry_size=pantry_size)

    def get(self, key: str) -> Optional[PantryEntry]:
        return self._entries.get(key)

    def items(self) -> Iterator[Tuple[str, PantryEntry]]:
        return iter(self._entries.items())

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
