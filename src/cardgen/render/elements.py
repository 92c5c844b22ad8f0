"""Element renderer: one absolutely-positioned HTML fragment per element.

:func:`render_element` dispatches on the element variant through
``ELEMENT_RENDERERS``.  The dispatch is total: a variant without a
registered renderer (``UnknownElement``) yields ``""`` so the rest of the
card still renders.

All geometry shares one rule (``position:absolute`` at ``(x, y)`` with the
element's width, height and z-index) and every interpolated value is
HTML-escaped.
"""

from __future__ import annotations

import html as html_mod
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from cardgen.core.fallback import first_present
from cardgen.core.resolver import ResolvedCard
from cardgen.model.elements import (
    ActionButtonElement,
    AvatarElement,
    BioElement,
    ButtonElement,
    ColorBlockElement,
    CompanyElement,
    DividerElement,
    ImageElement,
    LayoutElement,
    NameElement,
    PrimaryButtonElement,
    SecondaryButtonElement,
    SocialIconElement,
    TextElement,
    TextLineElement,
    TitleElement,
)
from cardgen.model.request import RenderRequest
from cardgen.render.actions import action_href, is_external
from cardgen.render.icons import DEFAULT_ICON, icon_svg
from cardgen.render.style_tokens import border_radius_css, font_size_css, icon_size_px

Renderer = Callable[[LayoutElement, ResolvedCard, RenderRequest], str]

_JUSTIFY = MappingProxyType({"center": "center", "right": "flex-end"})
_NEW_CONTEXT = ' target="_blank" rel="noopener noreferrer"'


# ── helpers ─────────────────────────────────────────────────────────


def _esc(value: object) -> str:
    return html_mod.escape("" if value is None else str(value), quote=True)


def base_style(el: LayoutElement) -> str:
    """Absolute-positioning declarations shared by every element kind."""
    return (
        f"position:absolute;left:{el.x}px;top:{el.y}px;"
        f"width:{el.width}px;height:{el.height}px;z-index:{el.z_index};"
    )


def _fraction(opacity: Optional[int], default: float = 1.0) -> str:
    value = default if opacity is None else opacity / 100
    return f"{value:g}"


def _div(style: str, inner: str = "") -> str:
    return f'<div style="{_esc(style)}">{inner}</div>'


def _link(href: str, style: str, inner: str) -> str:
    target = _NEW_CONTEXT if is_external(href) else ""
    return f'<a href="{_esc(href)}"{target} style="{_esc(style)}">{inner}</a>'


# ── avatar ──────────────────────────────────────────────────────────


def render_avatar(el: AvatarElement, card: ResolvedCard, req: RenderRequest) -> str:
    radius = border_radius_css(el.border_radius or "full")
    border = (
        f"border:{el.border_width}px solid {el.border_color or 'transparent'};"
        if el.border_width > 0
        else ""
    )
    style = (
        f"{base_style(el)}{border}border-radius:{radius};overflow:hidden;"
        f"background:{card.color_scheme.primary};"
    )
    if card.avatar_url:
        img = (
            f'<img src="{_esc(card.avatar_url)}" alt="{_esc(card.full_name)}" '
            'style="width:100%;height:100%;object-fit:cover;">'
        )
        return _div(style, img)

    text_px = round((el.height or 80) * 0.35, 2)
    style += "display:flex;align-items:center;justify-content:center;"
    span = (
        f'<span style="color:#fff;font-size:{text_px:g}px;font-weight:bold;">'
        f"{_esc(card.initials)}</span>"
    )
    return _div(style, span)


# ── single-line text ────────────────────────────────────────────────

# (value getter, default font px, default weight, opacity or None)
_TEXT_LINES: Mapping[type, tuple[Callable[[ResolvedCard], str], int, str, Optional[float]]] = (
    MappingProxyType({
        NameElement: (lambda c: c.full_name, 20, "bold", None),
        TitleElement: (lambda c: c.title, 14, "normal", 0.85),
        CompanyElement: (lambda c: c.company_name, 14, "500", 0.75),
    })
)


def render_text_line(el: TextLineElement, card: ResolvedCard, req: RenderRequest) -> str:
    value_of, default_px, default_weight, opacity = _TEXT_LINES[type(el)]
    justify = _JUSTIFY.get(el.text_align or "", "flex-start")
    style = (
        f"{base_style(el)}color:{el.text_color or card.color_scheme.text};"
        f"font-weight:{el.font_weight or default_weight};"
    )
    if opacity is not None:
        style += f"opacity:{opacity:g};"
    style += (
        f"display:flex;align-items:center;justify-content:{justify};overflow:hidden;"
    )
    span = (
        f'<span style="font-size:{_esc(font_size_css(el.font_size, default_px))};'
        f'white-space:nowrap;">{_esc(value_of(card))}</span>'
    )
    return _div(style, span)


def render_bio(el: BioElement, card: ResolvedCard, req: RenderRequest) -> str:
    style = (
        f"{base_style(el)}color:{el.text_color or card.color_scheme.text};"
        f"font-size:{font_size_css(el.font_size, 13)};opacity:0.8;padding:8px;"
        "line-height:1.4;overflow:hidden;white-space:pre-wrap;"
        f"text-align:{el.text_align or 'center'};"
    )
    return _div(style, _esc(card.bio))


def render_text(el: TextElement, card: ResolvedCard, req: RenderRequest) -> str:
    style = (
        f"{base_style(el)}color:{el.text_color or card.color_scheme.text};"
        f"font-size:{font_size_css(el.font_size)};"
        f"text-align:{el.text_align or 'left'};overflow:hidden;"
    )
    return _div(style, _esc(el.custom_value))


# ── decoration ──────────────────────────────────────────────────────


def render_image(el: ImageElement, card: ResolvedCard, req: RenderRequest) -> str:
    b = req.business
    if el.is_company_logo:
        url = first_present(
            lambda: b and b.logo_full_url,
            lambda: b and b.logo_icon_url,
            lambda: b and b.logo_url,
            lambda: el.image_url,
            default=None,
        )
    else:
        url = first_present(lambda: el.image_url, default=None)
    if url is None:
        return ""

    radius = border_radius_css(el.border_radius)
    style = (
        f"{base_style(el)}border-radius:{radius};overflow:hidden;display:flex;"
        f"align-items:center;justify-content:center;opacity:{_fraction(el.opacity)};"
    )
    img = (
        f'<img src="{_esc(url)}" alt="" style="width:100%;height:100%;'
        f'object-fit:contain;border-radius:{radius};">'
    )
    return _div(style, img)


def render_color_block(el: ColorBlockElement, card: ResolvedCard, req: RenderRequest) -> str:
    style = (
        f"{base_style(el)}background:{el.bg_color or card.color_scheme.secondary};"
        f"border-radius:{border_radius_css(el.border_radius)};"
        f"opacity:{_fraction(el.opacity)};"
    )
    return _div(style)


def render_divider(el: DividerElement, card: ResolvedCard, req: RenderRequest) -> str:
    style = (
        f"{base_style(el)}background:{el.color or card.color_scheme.text};"
        f"opacity:{_fraction(el.opacity, 0.2)};"
    )
    return _div(style)


# ── links ───────────────────────────────────────────────────────────


def _render_button(
    el: ButtonElement,
    card: ResolvedCard,
    req: RenderRequest,
    *,
    bg_default: str,
    icon_only: bool = False,
) -> str:
    href = action_href(el, req)
    icon = icon_svg(el.icon, icon_size_px(el.icon_size)) if el.icon else ""
    label = (
        f"<span>{_esc(el.label)}</span>" if el.label and not icon_only else ""
    )
    style = (
        f"{base_style(el)}background:{el.bg_color or bg_default};"
        f"color:{el.text_color or '#ffffff'};"
        f"border-radius:{border_radius_css(el.border_radius)};"
        "display:flex;align-items:center;justify-content:center;"
        f"gap:{0 if icon_only else 8}px;text-decoration:none;"
        f"font-size:{font_size_css(el.font_size, 14)};font-weight:500;"
    )
    return _link(href, style, icon + label)


def render_action_button(el: ActionButtonElement, card: ResolvedCard, req: RenderRequest) -> str:
    return _render_button(
        el, card, req,
        bg_default=card.color_scheme.secondary,
        icon_only=el.icon_only,
    )


def render_primary_button(el: PrimaryButtonElement, card: ResolvedCard, req: RenderRequest) -> str:
    return _render_button(el, card, req, bg_default=card.color_scheme.primary)


def render_secondary_button(el: SecondaryButtonElement, card: ResolvedCard, req: RenderRequest) -> str:
    return _render_button(el, card, req, bg_default=card.color_scheme.secondary)


def render_social_icon(el: SocialIconElement, card: ResolvedCard, req: RenderRequest) -> str:
    href = action_href(el, req)
    style = (
        f"{base_style(el)}background:{el.bg_color or 'transparent'};"
        f"color:{el.icon_color or card.color_scheme.primary};"
        f"border-radius:{border_radius_css(el.border_radius or 'full')};"
        "display:flex;align-items:center;justify-content:center;text-decoration:none;"
    )
    icon = icon_svg(el.platform or DEFAULT_ICON, icon_size_px(el.icon_size))
    return _link(href, style, icon)


# ── dispatch ────────────────────────────────────────────────────────

ELEMENT_RENDERERS: Mapping[type[LayoutElement], Renderer] = MappingProxyType({
    AvatarElement: render_avatar,
    NameElement: render_text_line,
    TitleElement: render_text_line,
    CompanyElement: render_text_line,
    BioElement: render_bio,
    ImageElement: render_image,
    ColorBlockElement: render_color_block,
    ActionButtonElement: render_action_button,
    PrimaryButtonElement: render_primary_button,
    SecondaryButtonElement: render_secondary_button,
    SocialIconElement: render_social_icon,
    DividerElement: render_divider,
    TextElement: render_text,
})


def render_element(el: LayoutElement, card: ResolvedCard, req: RenderRequest) -> str:
    """Render one element; unknown variants render as ``""``."""
    renderer = ELEMENT_RENDERERS.get(type(el))
    if renderer is None:
        return ""
    return renderer(el, card, req)
