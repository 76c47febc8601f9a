import dataclasses

import pytest

from pantry_utils.ingredients.normalization import (
    IngredientNormalizer,
    normalize_ingredient_name,
)
from pantry_utils.ingredients.vocabulary import Vocabulary, load_default_vocabulary


@pytest.fixture
def normalizer():
    return IngredientNormalizer()


@pytest.mark.parametrize(
    "input_text, expected_text",
    [
        ("2 lbs boneless chicken breast, diced", "boneless chicken breast"),
        ("2 cups diced yellow onion", "yellow onion"),
        ("3 cloves garlic, minced", "garlic"),
        ("1 large egg, room temperature", "egg"),
        ("1.5 tbsp extra-virgin olive oil", "virgin olive oil"),
        ("½ cup Milk", "milk"),
        ("Butter, softened", "butter"),
        ("4 slices bacon", "bacon"),
        ("Ground Beef", "beef"),
        ("  lots   of   whitespace  ", "lots of whitespace"),
        ("about 200 grams dark chocolate (chopped)", "dark chocolate"),
    ],
)
def test_normalize(normalizer, input_text, expected_text):
    """Test that quantities, units, prep and size words are stripped."""
    assert normalizer.normalize(input_text) == expected_text


@pytest.mark.parametrize("input_text", ["", "   ", "2 cups", "!!!", "1 large, chopped"])
def test_normalize_fully_stripped_input_is_empty(normalizer, input_text):
    assert normalizer.normalize(input_text) == ""


def test_normalize_phrase_split_by_stripped_token(normalizer):
    """A prep phrase interrupted by a number is still removed."""
    assert normalizer.normalize("room 2 temperature water") == "water"
    assert normalizer.normalize("room fresh temperature") == ""


@pytest.mark.parametrize(
    "input_text",
    [
        "2 lbs boneless chicken breast, diced",
        "room fresh temperature butter",
        "A.B-C!! d_e",
        "ñandú 3½ oz",
        "1 1/2 cups (about 200 g) sugar",
        "Extra  Large\tEGGS\n",
        "",
    ],
)
def test_normalize_is_idempotent(normalizer, input_text):
    once = normalizer.normalize(input_text)
    assert normalizer.normalize(once) == once


def test_normalize_with_custom_vocabulary():
    vocabulary = Vocabulary(
        prep_words=["toasted"], units=[], size_words=[], quantity_words=[]
    )
    normalizer = IngredientNormalizer(vocabulary)
    # numbers are always stripped, the default units are not
    assert normalizer.normalize("2 cups toasted pecans") == "cups pecans"


def test_normalize_with_extended_vocabulary():
    vocabulary = load_default_vocabulary()
    extended = dataclasses.replace(
        vocabulary, prep_words=vocabulary.prep_words + ("shredded",)
    )
    assert IngredientNormalizer(extended).normalize("1 cup shredded cheese") == "cheese"
    assert IngredientNormalizer(vocabulary).normalize("1 cup shredded cheese") == "shredded cheese"


def test_normalizer_is_callable(normalizer):
    assert normalizer("Diced Tomato") == "tomato"


def test_normalize_ingredient_name():
    assert normalize_ingredient_name("1 large egg, room temperature") == "egg"
