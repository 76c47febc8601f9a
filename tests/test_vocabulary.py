import dataclasses
import json

import pytest

from pantry_utils.ingredients.vocabulary import Vocabulary, load_default_vocabulary


def _vocabulary_data():
    return {
        "prep_words": ["Chopped"],
        "units": ["cup"],
        "size_words": ["large"],
        "quantity_words": ["slices"],
        "synonyms": {"Onion": ["yellow onion"], "salt": "sea salt"},
    }


def test_default_vocabulary():
    vocabulary = load_default_vocabulary()
    assert "room temperature" in vocabulary.prep_words
    assert "tbsp" in vocabulary.units
    assert "approximately" in vocabulary.size_words
    assert "chunks" in vocabulary.quantity_words
    assert "yellow onion" in vocabulary.synonyms_for("onion")
    assert vocabulary.synonyms_for("unobtainium") == ()


def test_default_vocabulary_is_cached():
    assert load_default_vocabulary() is load_default_vocabulary()


def test_from_dict():
    vocabulary = Vocabulary.from_dict(_vocabulary_data())
    assert vocabulary.prep_words == ("chopped",)
    assert vocabulary.synonyms_for("onion") == ("yellow onion",)
    assert vocabulary.synonyms_for("salt") == ("sea salt",)


@pytest.mark.parametrize("section", ["prep_words", "units", "size_words", "quantity_words"])
def test_from_dict_missing_section(section):
    data = _vocabulary_data()
    del data[section]
    with pytest.raises(ValueError, match=section):
        Vocabulary.from_dict(data)


def test_from_dict_bad_synonyms():
    data = _vocabulary_data()
    data["synonyms"] = ["onion"]
    with pytest.raises(ValueError, match="synonyms"):
        Vocabulary.from_dict(data)


def test_from_json(tmp_path):
    path = tmp_path / "vocabulary.json"
    path.write_text(json.dumps(_vocabulary_data()), encoding="utf-8")
    vocabulary = Vocabulary.from_json(str(path))
    assert vocabulary.units == ("cup",)


def test_vocabulary_is_immutable():
    vocabulary = load_default_vocabulary()
    with pytest.raises(dataclasses.FrozenInstanceError):
        vocabulary.units = ()
    with pytest.raises(TypeError):
        vocabulary.synonyms["onion"] = ("red onion",)
    assert isinstance(vocabulary.prep_words, tuple)
