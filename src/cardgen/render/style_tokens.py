"""Semantic style tokens → concrete pixel values.

Every lookup is total: unknown or absent tokens map to the documented
default instead of failing.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping, Optional

BORDER_RADIUS_PX: Mapping[str, int] = MappingProxyType({
    "none": 0,
    "sm": 4,
    "md": 8,
    "lg": 12,
    "xl": 16,
    "full": 9999,
})
DEFAULT_BORDER_RADIUS_PX = 8

FONT_SIZE_PX: Mapping[str, int] = MappingProxyType({
    "xs": 12,
    "sm": 14,
    "md": 16,
    "lg": 18,
    "xl": 20,
    "2xl": 24,
    "3xl": 32,
})
DEFAULT_FONT_SIZE_PX = 16

ICON_SIZE_PX: Mapping[str, int] = MappingProxyType({
    "sm": 16,
    "md": 20,
    "lg": 24,
    "xl": 32,
})
DEFAULT_ICON_SIZE_PX = 20

_NUMERIC_RE = re.compile(r"^\d+(?:\.\d+)?$")


def border_radius_px(token: Optional[str]) -> int:
    return BORDER_RADIUS_PX.get(token or "", DEFAULT_BORDER_RADIUS_PX)


def border_radius_css(token: Optional[str]) -> str:
    """CSS length for a radius token (``"0"`` rather than ``"0px"``)."""
    px = border_radius_px(token)
    return f"{px}px" if px else "0"


def font_size_css(token: Optional[str], default: int = DEFAULT_FONT_SIZE_PX) -> str:
    """CSS font size for a token.

    Resolution order: absent → *default*; ``"<n>px"`` passes through;
    named token → table; numeric string → integer px; anything else → 16px.
    """
    if token is None or not token.strip():
        return f"{default}px"
    token = token.strip()
    if token.endswith("px"):
        return token
    if token in FONT_SIZE_PX:
        return f"{FONT_SIZE_PX[token]}px"
    if _NUMERIC_RE.match(token):
        return f"{int(float(token))}px"
    return f"{DEFAULT_FONT_SIZE_PX}px"


def icon_size_px(token: Optional[str]) -> int:
    return ICON_SIZE_PX.get(token or "", DEFAULT_ICON_SIZE_PX)
