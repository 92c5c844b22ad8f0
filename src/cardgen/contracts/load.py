"""Load and validate JSON instances against the bundled schemas.

Usage::

    from cardgen.contracts.load import validate_instance, validate_file

    validate_instance(card_record, "render_request.schema.json")
    validate_file(Path("cards.json"), "cards_payload.schema.json")
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema

SCHEMA_DIR = "data/schemas"

RENDER_REQUEST_SCHEMA = "render_request.schema.json"
CARDS_PAYLOAD_SCHEMA = "cards_payload.schema.json"


def _schema_path(name: str) -> Path:
    """Resolve a bundled schema.

    Priority:
    1. ``src/cardgen/data/schemas/`` relative to this file (source checkout)
    2. package data via importlib.resources (wheel / zip installs)
    """
    canonical = Path(__file__).resolve().parents[1] / SCHEMA_DIR / name
    if canonical.exists():
        return canonical

    with resources.as_file(resources.files("cardgen") / SCHEMA_DIR / name) as p:
        return p


@lru_cache(maxsize=None)
def _load_schema_text(name: str) -> str:
    path = _schema_path(name)
    if not path.exists():
        raise FileNotFoundError(f"unknown schema: {name}")
    return path.read_text(encoding="utf-8")


def load_schema(name: str) -> dict[str, Any]:
    """Load a bundled JSON schema by filename."""
    return json.loads(_load_schema_text(name))


def validate_instance(instance: Any, schema_name: str) -> None:
    """Validate *instance* against the named schema.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    schema = load_schema(schema_name)
    jsonschema.validate(instance=instance, schema=schema)


def validate_file(instance_path: Path, schema_name: str) -> None:
    """Load a JSON file and validate it against the named schema."""
    instance = json.loads(instance_path.read_text(encoding="utf-8"))
    validate_instance(instance, schema_name)
