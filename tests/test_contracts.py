"""Tests for the bundled JSON schemas."""

from __future__ import annotations

import json

import jsonschema
import pytest

from cardgen.contracts.load import (
    CARDS_PAYLOAD_SCHEMA,
    RENDER_REQUEST_SCHEMA,
    load_schema,
    validate_file,
    validate_instance,
)


@pytest.mark.parametrize("name", [RENDER_REQUEST_SCHEMA, CARDS_PAYLOAD_SCHEMA])
def test_bundled_schemas_are_valid_draft_2020_12(name):
    schema = load_schema(name)
    jsonschema.Draft202012Validator.check_schema(schema)


def test_unknown_schema_raises():
    with pytest.raises(FileNotFoundError, match="unknown schema"):
        load_schema("nope.schema.json")


def test_render_request_accepts_nulls():
    validate_instance(
        {"card": {"public_slug": "x", "custom_title": None}, "profile": None, "socialProfile": None},
        RENDER_REQUEST_SCHEMA,
    )


def test_element_requires_type():
    bad = {"template": {"layout_config": {"elements": [{"id": "a", "x": 0}]}}}
    with pytest.raises(jsonschema.ValidationError):
        validate_instance(bad, RENDER_REQUEST_SCHEMA)


def test_element_geometry_must_be_numeric():
    bad = {"template": {"layout_config": {"elements": [{"type": "name", "x": "left"}]}}}
    with pytest.raises(jsonschema.ValidationError):
        validate_instance(bad, RENDER_REQUEST_SCHEMA)


def test_payload_error_must_be_string():
    with pytest.raises(jsonschema.ValidationError):
        validate_instance({"cards": [], "error": 42}, CARDS_PAYLOAD_SCHEMA)


def test_validate_file(tmp_path):
    path = tmp_path / "payload.json"
    path.write_text(json.dumps({"cards": [{"card": {"public_slug": "a"}}]}), encoding="utf-8")
    validate_file(path, CARDS_PAYLOAD_SCHEMA)
