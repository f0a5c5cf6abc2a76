import json

import pytest

from phrases import (
    MissingResourceError,
    MissingTemplateError,
    ModifierTable,
    PhraseDictionary,
    RotaryTable,
    load_file,
    reload,
)
from phrases.loader import candidate_locales


def write_phrases(directory, locale, raw):
    path = directory / f"{locale}.json"
    path.write_text(json.dumps(raw), encoding="utf-8")
    return path


def test_parses_into_typed_tables(sample_phrases):
    assert isinstance(sample_phrases.type_table("turn"), ModifierTable)
    assert isinstance(sample_phrases.type_table("rotary"), RotaryTable)
    assert "constants" not in sample_phrases.types
    assert "modes" not in sample_phrases.types
    assert sample_phrases.meta.capitalize_first_letter is True
    assert sample_phrases.no_lanes().default == "Continue straight"


def test_dictionary_is_read_only(sample_phrases):
    with pytest.raises(TypeError):
        sample_phrases.types["turn"] = None
    with pytest.raises(TypeError):
        sample_phrases.constants.lanes["xox"] = "Keep in the middle"


@pytest.mark.parametrize("locale", ["en", "de"])
def test_bundled_dictionaries_load(locale):
    dictionary = reload(locale)
    assert dictionary.locale == locale
    assert dictionary.version == "v5"
    assert dictionary.has_type("turn")
    assert dictionary.has_type("use lane")


def test_candidate_locales():
    assert candidate_locales("de-AT") == ["de-AT", "de_AT", "de", "en"]
    assert candidate_locales("en") == ["en"]
    assert candidate_locales(None) == ["en"]


def test_region_falls_back_to_language():
    assert reload("de-AT").locale == "de"


def test_unknown_locale_falls_back_to_development_locale():
    assert reload("xx").locale == "en"
    assert reload(None).locale == "en"


def test_missing_resource(tmp_path):
    with pytest.raises(MissingResourceError):
        reload("fr", data_dir=str(tmp_path))


def test_unparsable_resource(tmp_path):
    (tmp_path / "en.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(MissingResourceError):
        reload("en", data_dir=str(tmp_path))


def test_missing_version_table(tmp_path, sample_raw):
    path = write_phrases(tmp_path, "en", sample_raw)
    with pytest.raises(MissingResourceError):
        load_file(str(path), version="v4")


def test_custom_data_dir(tmp_path, sample_raw):
    write_phrases(tmp_path, "en", sample_raw)
    dictionary = reload("pt-BR", data_dir=str(tmp_path))
    assert dictionary.locale == "en"
    assert dictionary.type_table("turn").get("left").default == "Turn left"


def test_missing_default_in_modifier_set(sample_raw):
    del sample_raw["v5"]["turn"]["left"]["default"]
    with pytest.raises(MissingTemplateError) as excinfo:
        PhraseDictionary.from_mapping(sample_raw, version="v5", locale="en")
    assert excinfo.value.path == "v5/turn/left/default"


def test_missing_default_modifier(sample_raw):
    del sample_raw["v5"]["turn"]["default"]
    with pytest.raises(MissingTemplateError):
        PhraseDictionary.from_mapping(sample_raw, version="v5", locale="en")


def test_missing_rotary_default_level(sample_raw):
    sample_raw["v5"]["rotary"] = {"name": {"default": "Enter {rotaryName}"}}
    with pytest.raises(MissingTemplateError) as excinfo:
        PhraseDictionary.from_mapping(sample_raw, version="v5", locale="en")
    assert excinfo.value.path == "v5/rotary/default"


def test_missing_rotary_default_variant(sample_raw):
    del sample_raw["v5"]["roundabout"]["default"]["default"]
    sample_raw["v5"]["roundabout"]["default"]["exit"] = {"default": "Take the {exitIndex} exit"}
    with pytest.raises(MissingTemplateError):
        PhraseDictionary.from_mapping(sample_raw, version="v5", locale="en")


def test_missing_no_lanes(sample_raw):
    del sample_raw["v5"]["use lane"]["no_lanes"]
    with pytest.raises(MissingTemplateError):
        PhraseDictionary.from_mapping(sample_raw, version="v5", locale="en")


def test_missing_turn_type(sample_raw):
    del sample_raw["v5"]["turn"]
    with pytest.raises(MissingTemplateError):
        PhraseDictionary.from_mapping(sample_raw, version="v5", locale="en")


def test_missing_compass_phrase(sample_raw):
    del sample_raw["v5"]["constants"]["direction"]["northwest"]
    with pytest.raises(MissingTemplateError):
        PhraseDictionary.from_mapping(sample_raw, version="v5", locale="en")


def test_missing_meta_means_no_capitalization(sample_raw):
    del sample_raw["meta"]
    dictionary = PhraseDictionary.from_mapping(sample_raw, version="v5", locale="en")
    assert dictionary.meta.capitalize_first_letter is False
