"""Data resolver: every derived display value for one card.

All values are pure functions of the ``RenderRequest`` and ``RenderConfig``.
Each chain picks the first present candidate (see
:func:`cardgen.core.fallback.first_present`) and ends in a fixed default,
so resolution never fails on partial input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote, urlencode

from cardgen.core.config import DEFAULT_CONFIG, RenderConfig
from cardgen.core.fallback import first_present, is_present
from cardgen.model.request import DEFAULT_COLOR_SCHEME, ColorScheme, RenderRequest
from cardgen.render.template import apply_template

DEFAULT_PLACEHOLDER_COLOR = "#3B82F6"
DEFAULT_THEME_COLOR = "#000000"
FALLBACK_OG_TITLE = "Contact Card"
FALLBACK_OG_DESCRIPTION = "View contact information"
FALLBACK_SITE_NAME = "Digital Card"


@dataclass(frozen=True, slots=True)
class ResolvedCard:
    """Derived values consumed by the element renderer and the assembler."""

    full_name: str
    initials: str
    title: str
    bio: str
    company_name: str
    avatar_url: Optional[str]
    og_title: str
    og_description: str
    og_image: str
    favicon_url: str
    canonical_url: str
    site_name: str
    theme_color: str
    color_scheme: ColorScheme
    background_style: str
    output_name: Optional[str]


# ── identity ────────────────────────────────────────────────────────


def full_name(req: RenderRequest) -> str:
    p = req.profile
    if p is None:
        return ""
    parts = [part.strip() for part in (p.first_name, p.last_name) if is_present(part)]
    return " ".join(parts)


def initials(req: RenderRequest) -> str:
    p = req.profile
    letters = ""
    if p is not None:
        for part in (p.first_name, p.last_name):
            if is_present(part):
                letters += part.strip()[0]
    return letters.upper() or "U"


def job_title(req: RenderRequest) -> str:
    return (req.profile.job_title or "").strip() if req.profile else ""


def display_title(req: RenderRequest) -> str:
    return first_present(
        lambda: req.card.custom_title,
        lambda: req.profile and req.profile.job_title,
        default="",
    )


def company_name(req: RenderRequest) -> str:
    return first_present(lambda: req.business and req.business.name, default="")


def bio(req: RenderRequest) -> str:
    return first_present(lambda: req.card.custom_bio, default="")


def avatar_url(req: RenderRequest) -> Optional[str]:
    return first_present(
        lambda: req.card.profile_photo_url,
        lambda: req.profile and req.profile.avatar_url,
        default=None,
    )


# ── OG / share metadata ─────────────────────────────────────────────


def _template_variables(req: RenderRequest) -> dict[str, str]:
    return {
        "full_name": full_name(req),
        "job_title": job_title(req),
        "company_name": company_name(req),
    }


def _when(condition: bool, text: str) -> Optional[str]:
    return text if condition else None


def og_title(req: RenderRequest) -> str:
    name, job, company = full_name(req), job_title(req), company_name(req)
    return first_present(
        lambda: apply_template(req.card.og_title, _template_variables(req)),
        lambda: _when(bool(name and job), f"{name} - {job}"),
        lambda: _when(bool(name and company), f"{name} at {company}"),
        lambda: name,
        lambda: company,
        default=FALLBACK_OG_TITLE,
    )


def og_description(req: RenderRequest) -> str:
    name, job, company = full_name(req), job_title(req), company_name(req)
    return first_present(
        lambda: apply_template(req.card.og_description, _template_variables(req)),
        lambda: req.card.custom_bio,
        lambda: _when(bool(name and job and company), f"{name}, {job} at {company}"),
        lambda: _when(bool(name and job), f"{name}, {job}"),
        lambda: _when(bool(name and company), f"Connect with {name} at {company}"),
        lambda: _when(bool(name), f"Connect with {name}"),
        lambda: _when(bool(company), f"Contact card for {company}"),
        default=FALLBACK_OG_DESCRIPTION,
    )


def placeholder_image_url(
    initials_text: str,
    color: Optional[str],
    config: RenderConfig = DEFAULT_CONFIG,
) -> str:
    """Initials avatar from the external image service (never fetched)."""
    hex_color = (color or DEFAULT_PLACEHOLDER_COLOR).strip().lstrip("#")
    query = urlencode(
        {
            "name": initials_text,
            "background": hex_color,
            "color": "fff",
            "size": "1200",
            "bold": "true",
        }
    )
    return f"{config.placeholder_base_url}?{query}"


def og_image(req: RenderRequest, config: RenderConfig = DEFAULT_CONFIG) -> str:
    b = req.business
    return first_present(
        lambda: req.card.og_image_url,
        lambda: req.card.profile_photo_url,
        lambda: req.profile and req.profile.avatar_url,
        lambda: b and b.logo_full_url,
        lambda: b and b.logo_url,
        default=None,
    ) or placeholder_image_url(
        initials(req),
        b.primary_color if b and is_present(b.primary_color) else None,
        config,
    )


def favicon_url(req: RenderRequest, config: RenderConfig = DEFAULT_CONFIG) -> str:
    return first_present(
        lambda: req.business and req.business.logo_icon_url,
        lambda: req.business and req.business.logo_url,
        default=f"{config.app_url}/pwa-192x192.png",
    )


def canonical_url(req: RenderRequest, config: RenderConfig = DEFAULT_CONFIG) -> str:
    """Live card URL: slug path when public, else a token query; always embedded."""
    base = config.live_base_url.rstrip("/")
    if is_present(req.card.public_slug):
        return f"{base}/{quote(req.card.public_slug.strip(), safe='')}?embed=true"
    token = (req.card.public_token or "").strip()
    return f"{base}/?{urlencode({'token': token, 'embed': 'true'})}"


# ── theme ───────────────────────────────────────────────────────────


def color_scheme(req: RenderRequest) -> ColorScheme:
    if req.template is not None and req.template.color_scheme is not None:
        return req.template.color_scheme
    return DEFAULT_COLOR_SCHEME


def theme_color(req: RenderRequest) -> str:
    return first_present(
        lambda: req.template and req.template.color_scheme and req.template.color_scheme.primary,
        lambda: req.business and req.business.primary_color,
        default=DEFAULT_THEME_COLOR,
    )


def background_style(req: RenderRequest) -> str:
    """CSS declarations filling the card container."""
    scheme = color_scheme(req)
    t = req.template
    kind = t.background_type if t else None
    value = t.background_value if t else None
    if kind == "image" and is_present(value):
        return (
            f"background-image:url({value});"
            "background-size:cover;background-position:center;"
        )
    if kind == "gradient":
        return f"background:linear-gradient(135deg, {scheme.primary}, {scheme.secondary});"
    if is_present(value):
        return f"background:{value};"
    return f"background:{scheme.background};"


# ── entry point ─────────────────────────────────────────────────────


def resolve_card(
    request: RenderRequest,
    config: RenderConfig = DEFAULT_CONFIG,
) -> ResolvedCard:
    """Compute every derived value for *request*."""
    company = company_name(request)
    return ResolvedCard(
        full_name=full_name(request),
        initials=initials(request),
        title=display_title(request),
        bio=bio(request),
        company_name=company,
        avatar_url=avatar_url(request),
        og_title=og_title(request),
        og_description=og_description(request),
        og_image=og_image(request, config),
        favicon_url=favicon_url(request, config),
        canonical_url=canonical_url(request, config),
        site_name=company or FALLBACK_SITE_NAME,
        theme_color=theme_color(request),
        color_scheme=color_scheme(request),
        background_style=background_style(request),
        output_name=request.card.output_name,
    )
