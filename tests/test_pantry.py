import pytest

from pantry_utils.ingredients.pantry import PantryIndex, generate_variants


@pytest.mark.parametrize(
    "key, expected",
    [
        ("chicken breast", ["chicken breasts", "chickenbreast"]),
        ("eggs", ["egg"]),
        ("milk", ["milks"]),
        ("gas", []),
        ("green beans", ["green bean", "greenbeans"]),
    ],
)
def test_generate_variants(key, expected):
    assert generate_variants(key) == expected


def test_build_registers_variants():
    index = PantryIndex.build({"proteins": ["Chicken Breast"]})
    assert list(index) == ["chicken breast", "chicken breasts", "chickenbreast"]
    for key in index:
        entry = index.get(key)
        assert entry.original == "Chicken Breast"
        assert entry.categories == ("proteins",)
    assert index.get("chicken breast").normalized == "chicken breast"


def test_build_accumulates_categories():
    index = PantryIndex.build(
        {
            "cooking_essentials": ["Chicken Stock"],
            "pantry_staples": ["chicken stock"],
        }
    )
    entry = index.get("chicken stock")
    assert entry.original == "Chicken Stock"
    assert entry.categories == ("cooking_essentials", "pantry_staples")
    assert entry.category == "cooking_essentials"
    assert index.get("chickenstock").categories == ("cooking_essentials", "pantry_staples")


def test_build_first_registration_wins():
    index = PantryIndex.build({"a": ["eggs"], "b": ["egg"]})
    entry = index.get("egg")
    assert entry.original == "eggs"
    assert entry.categories == ("a", "b")
    assert index.get("eggs").original == "eggs"


def test_build_skips_names_that_normalize_to_nothing():
    index = PantryIndex.build({"spices": ["Cloves", "cumin"]})
    assert "" not in index
    assert list(index) == ["cumin", "cumins"]
    assert index.pantry_size == 2
    assert len(index) == 2


def test_index_is_independent_of_the_pantry():
    pantry = {"fresh_produce": ["lime"]}
    index = PantryIndex.build(pantry)
    pantry["fresh_produce"].append("lemon")
    pantry["dairy_cold"] = ["milk"]
    assert "lemon" not in index
    assert "milk" not in index
    with pytest.raises(TypeError):
        index._entries["lemon"] = index.get("lime")


def test_empty_pantry():
    index = PantryIndex.build({})
    assert len(index) == 0
    assert index.get("milk") is None
