"""``{{name}}`` placeholder interpolation for OG title/description templates."""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional

_PLACEHOLDER_RE = re.compile(r"\{\{\s*([A-Za-z0-9_]+)\s*\}\}")


def apply_template(template: Optional[str], variables: Mapping[str, Any]) -> str:
    """Replace every ``{{name}}`` in *template* with ``variables[name]``.

    Placeholders whose name is missing (or mapped to ``None``) become the
    empty string.  The result is stripped.  Never raises.
    """
    if not template:
        return ""

    def _sub(match: re.Match[str]) -> str:
        value = variables.get(match.group(1))
        return "" if value is None else str(value)

    return _PLACEHOLDER_RE.sub(_sub, template).strip()
