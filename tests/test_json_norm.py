"""Tests for the canonical JSON normalization layer."""

import json
from pathlib import Path

from cardgen.core.resolver import resolve_card
from cardgen.model import ElementKind
from cardgen.model.request import RenderRequest
from cardgen.utils.json_norm import stable_json_dump, stable_json_dumps, to_builtin


def test_stable_json_dumps_sorts_keys_and_adds_newline():
    s = stable_json_dumps({"b": 1, "a": 2})
    assert s.endswith("\n")
    # Keys should be sorted in the serialized output
    assert s.index('"a"') < s.index('"b"')


def test_stable_json_dumps_normalizes_paths():
    s = stable_json_dumps({"p": Path("a") / "b"})
    obj = json.loads(s)
    assert obj["p"] == "a/b"


def test_enum_members_become_values():
    assert to_builtin({"kind": ElementKind.COLOR_BLOCK}) == {"kind": "color_block"}


def test_resolved_card_serializes():
    req = RenderRequest.from_dict({
        "card": {"public_slug": "jane", "custom_fields": {"profile_photo_url": "p.png"}},
        "profile": {"first_name": "Jane"},
    })
    obj = json.loads(stable_json_dumps(resolve_card(req)))
    assert obj["full_name"] == "Jane"
    assert obj["avatar_url"] == "p.png"
    assert obj["color_scheme"]["primary"] == "#3B82F6"


def test_read_only_mappings_become_dicts():
    req = RenderRequest.from_dict({"card": {"custom_fields": {"b": 1, "a": [1, 2]}}})
    assert to_builtin(req.card)["custom_fields"] == {"a": [1, 2], "b": 1}


def test_stable_json_dump_writes_to_file_like(tmp_path):
    out = tmp_path / "x.json"
    with out.open("w", encoding="utf-8") as f:
        stable_json_dump({"b": 1, "a": 2}, f)
    txt = out.read_text(encoding="utf-8")
    assert txt.endswith("\n")
    assert '"a"' in txt and '"b"' in txt
