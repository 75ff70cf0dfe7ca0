import json

import pytest

from random_show_themes.errors import ParseError, SchemaError
from random_show_themes.loaders import load_allow_list, load_catalog, read_json_source


def test_load_catalog_keys_shows_by_integer_id(sample_catalog):
    catalog = load_catalog(json.dumps(sample_catalog))

    assert list(catalog) == [1, 2]
    assert catalog[1].title == "A"
    assert catalog[2].ending_themes == ("Y", "Z")


def test_load_catalog_accepts_bytes():
    catalog = load_catalog(b'{"10": {"mal_id": 10, "title": "Bytes"}}')

    assert catalog[10].title == "Bytes"


def test_load_catalog_preserves_document_order():
    raw = '{"3": {"id": 3, "title": "C"}, "1": {"id": 1, "title": "A"}, "2": {"id": 2, "title": "B"}}'

    assert list(load_catalog(raw)) == [3, 1, 2]


def test_load_catalog_empty_object():
    assert load_catalog("{}") == {}


def test_load_catalog_key_wins_over_record_id():
    catalog = load_catalog('{"5": {"id": 6, "title": "Mismatch"}}')

    assert list(catalog) == [5]
    assert catalog[5].id == 6


@pytest.mark.parametrize("raw", ["not json", "{", "", '{"1": }'])
def test_load_catalog_invalid_json(raw):
    with pytest.raises(ParseError):
        load_catalog(raw)


@pytest.mark.parametrize("raw", ["[]", "1", '"shows"', "null"])
def test_load_catalog_requires_top_level_object(raw):
    with pytest.raises(ParseError, match="expected a JSON object"):
        load_catalog(raw)


@pytest.mark.parametrize(
    "record",
    [
        {"title": "No id"},
        {"id": 1},
        {"id": 1, "title": "T", "opening_themes": "not a list"},
        {"id": 1, "title": "T", "ending_themes": [1, 2]},
        {"id": -4, "title": "Negative"},
        {"id": True, "title": "Boolean id"},
        {"id": "1", "title": "String id"},
        {"id": 1.0, "title": "Float id"},
        {"mal_id": "1", "title": "String mal_id"},
    ],
)
def test_load_catalog_schema_errors(record):
    with pytest.raises(SchemaError, match="show 1"):
        load_catalog(json.dumps({"1": record}))


def test_load_catalog_rejects_non_object_record():
    with pytest.raises(SchemaError, match="expected an object"):
        load_catalog('{"1": ["A"]}')


@pytest.mark.parametrize("key", ["abc", "-1", "0", "1.5", " 1"])
def test_load_catalog_rejects_non_integer_keys(key):
    with pytest.raises(SchemaError, match="not a positive integer"):
        load_catalog(json.dumps({key: {"id": 1, "title": "T"}}))


def test_load_catalog_error_names_source():
    with pytest.raises(SchemaError) as exc_info:
        load_catalog('{"1": {"id": 1}}', source="shows.json")

    assert str(exc_info.value).startswith("shows.json: ")
    assert exc_info.value.source == "shows.json"


def test_load_allow_list():
    assert load_allow_list("[1, 2, 2, 3]") == frozenset({1, 2, 3})


def test_load_allow_list_empty_is_not_none():
    allow_list = load_allow_list("[]")

    assert allow_list is not None
    assert allow_list == frozenset()


@pytest.mark.parametrize("raw", ["[1, 2", "{}", '["1"]', "[1.5]", "[true]", "[null]", "3"])
def test_load_allow_list_rejects_malformed_input(raw):
    with pytest.raises(ParseError):
        load_allow_list(raw)


def test_read_json_source(tmp_path):
    path = tmp_path / "shows.json"
    path.write_text("{}", encoding="utf-8")

    assert read_json_source(path) == b"{}"


def test_read_json_source_missing_file(tmp_path):
    path = tmp_path / "missing.json"

    with pytest.raises(ParseError, match="could not read file") as exc_info:
        read_json_source(path)

    assert exc_info.value.source == str(path)
