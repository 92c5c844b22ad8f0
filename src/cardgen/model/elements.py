"""Layout elements: one frozen variant per element kind.

Each variant carries only the style fields its kind uses.  Raw
``layout_config.elements[]`` entries (camelCase JSON) are turned into
variants by :func:`parse_element`, which is total: an unrecognised ``type``
becomes an :class:`UnknownElement` instead of an error.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Iterable, Mapping, Optional

from . import ElementKind


# ── variants ────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class LayoutElement:
    """Fields shared by every element: identity, geometry, stacking."""

    kind: ClassVar[ElementKind] = ElementKind.UNKNOWN

    id: str = ""
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    z_index: float = 0
    is_visible: bool = True


@dataclass(frozen=True, slots=True)
class UnknownElement(LayoutElement):
    """Forward-compatible fallback for element types this build does not know."""

    type_name: str = ""


@dataclass(frozen=True, slots=True)
class AvatarElement(LayoutElement):
    kind: ClassVar[ElementKind] = ElementKind.AVATAR

    border_radius: Optional[str] = None
    border_width: int = 0
    border_color: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TextLineElement(LayoutElement):
    """Single-line text bound to one resolved value (name/title/company)."""

    font_size: Optional[str] = None
    font_weight: Optional[str] = None
    text_align: Optional[str] = None
    text_color: Optional[str] = None


@dataclass(frozen=True, slots=True)
class NameElement(TextLineElement):
    kind: ClassVar[ElementKind] = ElementKind.NAME


@dataclass(frozen=True, slots=True)
class TitleElement(TextLineElement):
    kind: ClassVar[ElementKind] = ElementKind.TITLE


@dataclass(frozen=True, slots=True)
class CompanyElement(TextLineElement):
    kind: ClassVar[ElementKind] = ElementKind.COMPANY


@dataclass(frozen=True, slots=True)
class BioElement(LayoutElement):
    kind: ClassVar[ElementKind] = ElementKind.BIO

    font_size: Optional[str] = None
    text_align: Optional[str] = None
    text_color: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ImageElement(LayoutElement):
    kind: ClassVar[ElementKind] = ElementKind.IMAGE

    image_url: Optional[str] = None
    opacity: Optional[int] = None
    border_radius: Optional[str] = None

    @property
    def is_company_logo(self) -> bool:
        return "company_logo" in self.id or "company_full_logo" in self.id


@dataclass(frozen=True, slots=True)
class ColorBlockElement(LayoutElement):
    kind: ClassVar[ElementKind] = ElementKind.COLOR_BLOCK

    bg_color: Optional[str] = None
    opacity: Optional[int] = None
    border_radius: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ActionElement(LayoutElement):
    """Anything that renders as a link resolved by the action resolver."""

    action_source: Optional[str] = None
    action_type: Optional[str] = None
    custom_value: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ButtonElement(ActionElement):
    bg_color: Optional[str] = None
    text_color: Optional[str] = None
    icon: Optional[str] = None
    icon_size: Optional[str] = None
    label: Optional[str] = None
    font_size: Optional[str] = None
    border_radius: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ActionButtonElement(ButtonElement):
    kind: ClassVar[ElementKind] = ElementKind.ACTION_BUTTON

    icon_only: bool = False


@dataclass(frozen=True, slots=True)
class PrimaryButtonElement(ButtonElement):
    kind: ClassVar[ElementKind] = ElementKind.BUTTON_PRIMARY


@dataclass(frozen=True, slots=True)
class SecondaryButtonElement(ButtonElement):
    kind: ClassVar[ElementKind] = ElementKind.BUTTON_SECONDARY


@dataclass(frozen=True, slots=True)
class SocialIconElement(ActionElement):
    kind: ClassVar[ElementKind] = ElementKind.SOCIAL_ICON

    platform: Optional[str] = None
    icon_size: Optional[str] = None
    icon_color: Optional[str] = None
    bg_color: Optional[str] = None
    border_radius: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DividerElement(LayoutElement):
    kind: ClassVar[ElementKind] = ElementKind.DIVIDER

    color: Optional[str] = None
    opacity: Optional[int] = None


@dataclass(frozen=True, slots=True)
class TextElement(LayoutElement):
    kind: ClassVar[ElementKind] = ElementKind.TEXT

    custom_value: Optional[str] = None
    font_size: Optional[str] = None
    text_align: Optional[str] = None
    text_color: Optional[str] = None


ELEMENT_TYPES: Mapping[str, type[LayoutElement]] = MappingProxyType({
    cls.kind.value: cls
    for cls in (
        AvatarElement,
        NameElement,
        TitleElement,
        CompanyElement,
        BioElement,
        ImageElement,
        ColorBlockElement,
        ActionButtonElement,
        PrimaryButtonElement,
        SecondaryButtonElement,
        SocialIconElement,
        DividerElement,
        TextElement,
    )
})


# ── parsing ─────────────────────────────────────────────────────────

# camelCase JSON key → dataclass field name (keys not listed map to themselves)
_FIELD_ALIASES = MappingProxyType({
    "zIndex": "z_index",
    "isVisible": "is_visible",
    "borderRadius": "border_radius",
    "borderWidth": "border_width",
    "borderColor": "border_color",
    "fontSize": "font_size",
    "fontWeight": "font_weight",
    "textAlign": "text_align",
    "textColor": "text_color",
    "bgColor": "bg_color",
    "imageUrl": "image_url",
    "iconSize": "icon_size",
    "iconColor": "icon_color",
    "iconOnly": "icon_only",
    "actionSource": "action_source",
    "actionType": "action_type",
    "customValue": "custom_value",
})


def _as_int(value: Any) -> int:
    """Coerce a JSON number (or numeric string) to ``int``.

    Raises ``ValueError`` for anything non-numeric.
    """
    if isinstance(value, bool):
        raise ValueError(f"expected a number, got {value!r}")
    if isinstance(value, (int, float)):
        return int(value)
    return int(float(str(value)))


def _as_optional_int(value: Any) -> int:
    return 0 if value is None else _as_int(value)


def _as_z_index(value: Any) -> float:
    """Stacking key; integral values stay ``int``, fractions are kept."""
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(f"expected a number, got {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"z-index must be finite, got {value!r}")
    return int(number) if number.is_integer() else number


def _as_opacity(value: Any) -> Optional[int]:
    if value is None:
        return None
    return max(0, min(100, _as_int(value)))


def _as_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


_COERCERS: Mapping[str, Callable[[Any], Any]] = MappingProxyType({
    "id": lambda v: "" if v is None else str(v),
    "x": _as_optional_int,
    "y": _as_optional_int,
    "width": _as_optional_int,
    "height": _as_optional_int,
    "z_index": _as_z_index,
    "is_visible": lambda v: v is not False,
    "border_width": _as_optional_int,
    "opacity": _as_opacity,
    "icon_only": lambda v: v is True,
})

_FIELD_NAMES: Mapping[type[LayoutElement], frozenset[str]] = MappingProxyType({
    cls: frozenset(f.name for f in fields(cls))
    for cls in (*ELEMENT_TYPES.values(), UnknownElement)
})


def parse_element(raw: Mapping[str, Any]) -> LayoutElement:
    """Build the element variant for one raw ``layout_config`` entry.

    Unknown keys are ignored; an unknown ``type`` yields
    :class:`UnknownElement`.
    """
    if not isinstance(raw, Mapping):
        raise TypeError(f"layout element must be an object, got {type(raw).__name__}")

    type_name = _as_str(raw.get("type")) or ""
    cls = ELEMENT_TYPES.get(type_name, UnknownElement)
    allowed = _FIELD_NAMES[cls]

    values: dict[str, Any] = {}
    for key, value in raw.items():
        name = _FIELD_ALIASES.get(key, key)
        if name not in allowed or name == "type_name":
            continue
        values[name] = _COERCERS.get(name, _as_str)(value)

    if cls is UnknownElement:
        values["type_name"] = type_name
    return cls(**values)


def parse_elements(raw_elements: Iterable[Mapping[str, Any]] | None) -> tuple[LayoutElement, ...]:
    return tuple(parse_element(raw) for raw in raw_elements or ())


def stacking_order(elements: Iterable[LayoutElement]) -> list[LayoutElement]:
    """Visible elements in ascending z-index; ties keep input order."""
    return sorted(
        (el for el in elements if el.is_visible),
        key=lambda el: el.z_index,
    )
