"""RenderRequest: the immutable per-card input bundle.

Built once per card from the JSON record the data-fetch collaborator
delivers::

    {
      "card": {...}, "profile": {...}, "business": {...},
      "template": {"layout_config": {"elements": [...]}, "color_scheme": {...}},
      "socialProfile": {"linkedin_url": "..."}
    }

Every sub-record except ``card`` is optional; ``card`` is always present
(empty when the record omits it).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from cardgen.core.fallback import first_present
from cardgen.model.elements import LayoutElement, parse_elements

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def _str_or_none(raw: Mapping[str, Any], key: str) -> Optional[str]:
    value = raw.get(key)
    if value is None:
        return None
    return str(value)


def _mapping(value: Any) -> Mapping[str, Any]:
    if isinstance(value, Mapping):
        return MappingProxyType(dict(value))
    return _EMPTY


@dataclass(frozen=True, slots=True)
class CardRecord:
    """Per-instance overrides for one shareable card."""

    public_slug: Optional[str] = None
    public_token: Optional[str] = None
    custom_title: Optional[str] = None
    custom_bio: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image_url: Optional[str] = None
    custom_fields: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)

    @property
    def output_name(self) -> Optional[str]:
        """Slug, else token: the name the file writer saves the page under."""
        return first_present(
            lambda: self.public_slug,
            lambda: self.public_token,
            default=None,
        )

    @property
    def profile_photo_url(self) -> Optional[str]:
        """Photo override from ``custom_fields``; non-string values are ignored."""
        value = self.custom_fields.get("profile_photo_url")
        return value if isinstance(value, str) else None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any] | None) -> CardRecord:
        raw = raw or {}
        return cls(
            public_slug=_str_or_none(raw, "public_slug"),
            public_token=_str_or_none(raw, "public_token"),
            custom_title=_str_or_none(raw, "custom_title"),
            custom_bio=_str_or_none(raw, "custom_bio"),
            og_title=_str_or_none(raw, "og_title"),
            og_description=_str_or_none(raw, "og_description"),
            og_image_url=_str_or_none(raw, "og_image_url"),
            custom_fields=_mapping(raw.get("custom_fields")),
        )


@dataclass(frozen=True, slots=True)
class ProfileRecord:
    """Person identity."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    job_title: Optional[str] = None
    email: Optional[str] = None
    work_email: Optional[str] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> ProfileRecord:
        return cls(**{f: _str_or_none(raw, f) for f in cls.__dataclass_fields__})


@dataclass(frozen=True, slots=True)
class BusinessRecord:
    """Organization identity and contact channels."""

    name: Optional[str] = None
    logo_url: Optional[str] = None
    logo_full_url: Optional[str] = None
    logo_icon_url: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    primary_color: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> BusinessRecord:
        return cls(**{f: _str_or_none(raw, f) for f in cls.__dataclass_fields__})


@dataclass(frozen=True, slots=True)
class ColorScheme:
    primary: str
    secondary: str
    background: str
    text: str

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any], *, fallback: ColorScheme) -> ColorScheme:
        """Parse a scheme; individual missing colors come from *fallback*."""
        return cls(
            primary=_str_or_none(raw, "primary") or fallback.primary,
            secondary=_str_or_none(raw, "secondary") or fallback.secondary,
            background=_str_or_none(raw, "background") or fallback.background,
            text=_str_or_none(raw, "text") or fallback.text,
        )


DEFAULT_COLOR_SCHEME = ColorScheme(
    primary="#3B82F6",
    secondary="#1E40AF",
    background="#FFFFFF",
    text="#1F2937",
)


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    elements: tuple[LayoutElement, ...] = ()

    @classmethod
    def from_dict(cls, raw: Any) -> LayoutConfig:
        """Parse ``layout_config``; anything but an object means no elements."""
        if not isinstance(raw, Mapping):
            return cls()
        return cls(elements=parse_elements(raw.get("elements")))


@dataclass(frozen=True, slots=True)
class TemplateRecord:
    """Reusable visual design: layout, colors, background."""

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    color_scheme: Optional[ColorScheme] = None
    background_type: Optional[str] = None
    background_value: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> TemplateRecord:
        scheme_raw = raw.get("color_scheme")
        return cls(
            layout=LayoutConfig.from_dict(raw.get("layout_config")),
            color_scheme=(
                ColorScheme.from_dict(scheme_raw, fallback=DEFAULT_COLOR_SCHEME)
                if isinstance(scheme_raw, Mapping)
                else None
            ),
            background_type=_str_or_none(raw, "background_type"),
            background_value=_str_or_none(raw, "background_value"),
        )


@dataclass(frozen=True, slots=True)
class SocialProfile:
    """External social network URLs keyed by platform (``linkedin``, ...)."""

    urls: Mapping[str, str] = field(default_factory=lambda: _EMPTY)

    def url_for(self, platform: str) -> Optional[str]:
        return self.urls.get(platform)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> SocialProfile:
        urls = {
            key[: -len("_url")]: str(value)
            for key, value in raw.items()
            if key.endswith("_url") and value
        }
        return cls(urls=MappingProxyType(urls))


@dataclass(frozen=True, slots=True)
class RenderRequest:
    """Everything needed to render one card, immutable for the render."""

    card: CardRecord = field(default_factory=CardRecord)
    profile: Optional[ProfileRecord] = None
    business: Optional[BusinessRecord] = None
    template: Optional[TemplateRecord] = None
    social_profile: Optional[SocialProfile] = None

    @property
    def elements(self) -> tuple[LayoutElement, ...]:
        if self.template is None:
            return ()
        return self.template.layout.elements

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> RenderRequest:
        """Parse one card record.

        ``socialProfile`` (the collaborator's key) and ``social_profile``
        are both accepted.
        """
        social_raw = raw.get("socialProfile", raw.get("social_profile"))
        return cls(
            card=CardRecord.from_dict(_optional_mapping(raw, "card")),
            profile=_parse_optional(raw, "profile", ProfileRecord.from_dict),
            business=_parse_optional(raw, "business", BusinessRecord.from_dict),
            template=_parse_optional(raw, "template", TemplateRecord.from_dict),
            social_profile=(
                SocialProfile.from_dict(social_raw)
                if isinstance(social_raw, Mapping)
                else None
            ),
        )


def _optional_mapping(raw: Mapping[str, Any], key: str) -> Optional[Mapping[str, Any]]:
    value = raw.get(key)
    return value if isinstance(value, Mapping) else None


def _parse_optional(raw, key, parser):
    value = _optional_mapping(raw, key)
    return parser(value) if value is not None else None
