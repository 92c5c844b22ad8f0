"""Document assembler: the complete, self-contained card page.

Wraps the ordered element fragments in a fixed-size canvas, writes the
metadata block (title, description, canonical link, OG/Twitter tags,
theme color, favicon) from the resolved card, and adds one responsive
rule: edge-to-edge on phones, a centered rounded card with a shadow once
the viewport is wider than the canvas.

Also renders the two static site pages (landing and not-found) that are
published next to the cards.
"""

from __future__ import annotations

import html as html_mod
from typing import Iterable

from cardgen.core.config import DEFAULT_CONFIG, RenderConfig
from cardgen.core.resolver import ResolvedCard

# Extra viewport width before the desktop framing kicks in.
_DESKTOP_GUTTER_PX = 40

_CARD_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0, maximum-scale=1.0, user-scalable=no">
  <title>{title}</title>
  <meta name="title" content="{title}">
  <meta name="description" content="{description}">
  <meta property="og:type" content="profile">
  <meta property="og:url" content="{canonical}">
  <meta property="og:title" content="{title}">
  <meta property="og:description" content="{description}">
  <meta property="og:image" content="{image}">
  <meta property="og:image:width" content="1200">
  <meta property="og:image:height" content="630">
  <meta property="og:site_name" content="{site_name}">
  <meta name="twitter:card" content="summary_large_image">
  <meta name="twitter:url" content="{canonical}">
  <meta name="twitter:title" content="{title}">
  <meta name="twitter:description" content="{description}">
  <meta name="twitter:image" content="{image}">
  <meta name="theme-color" content="{theme_color}">
  <link rel="canonical" href="{canonical}">
  <link rel="icon" type="image/png" href="{favicon}">
  <style>
    *{{box-sizing:border-box;margin:0;padding:0;}}
    body{{font-family:-apple-system,BlinkMacSystemFont,'Segoe UI',Roboto,'Helvetica Neue',Arial,sans-serif;min-height:100vh;display:flex;justify-content:center;align-items:flex-start;padding:0;background:#f0f0f0;}}
    .card-container{{width:100%;max-width:{canvas_width}px;min-height:100vh;{background}position:relative;overflow:hidden;}}
    .card-canvas{{position:relative;width:100%;height:{canvas_height}px;}}
    a{{transition:opacity 0.2s;}}a:hover{{opacity:0.85;}}a:active{{opacity:0.7;}}
    @media(min-width:{breakpoint}px){{body{{align-items:center;padding:20px;}}.card-container{{min-height:auto;height:{canvas_height}px;border-radius:24px;box-shadow:0 25px 50px -12px rgba(0,0,0,0.25);}}}}
  </style>
</head>
<body>
  <div class="card-container">
    <div class="card-canvas">
{elements}
    </div>
  </div>
</body>
</html>"""

_NOTICE_TEMPLATE = """\
<!DOCTYPE html><html><head><meta charset="UTF-8"><title>{title}</title><style>body{{font-family:sans-serif;display:flex;justify-content:center;align-items:center;min-height:100vh;margin:0;background:#f5f5f5;}}.container{{text-align:center;padding:2rem;}}h1{{color:#333;}}p{{color:#666;}}</style></head><body><div class="container"><h1>{title}</h1><p>{message}</p></div></body></html>"""


def _esc(value: str) -> str:
    return html_mod.escape(value, quote=True)


def _css_value(value: str) -> str:
    """Keep a declaration from closing the surrounding ``<style>`` element."""
    return value.replace("<", "").replace(">", "")


def render_document(
    card: ResolvedCard,
    fragments: Iterable[str],
    config: RenderConfig = DEFAULT_CONFIG,
) -> str:
    """Assemble the full card page from ordered element *fragments*."""
    return _CARD_TEMPLATE.format(
        title=_esc(card.og_title),
        description=_esc(card.og_description),
        canonical=_esc(card.canonical_url),
        image=_esc(card.og_image),
        site_name=_esc(card.site_name),
        theme_color=_esc(card.theme_color),
        favicon=_esc(card.favicon_url),
        background=_css_value(card.background_style),
        canvas_width=config.canvas_width,
        canvas_height=config.canvas_height,
        breakpoint=config.canvas_width + _DESKTOP_GUTTER_PX,
        elements="\n".join(fragments),
    )


def render_index_page() -> str:
    return _NOTICE_TEMPLATE.format(
        title="Digital Cards",
        message="Visit a specific card URL to view it.",
    )


def render_not_found_page() -> str:
    return _NOTICE_TEMPLATE.format(
        title="Card Not Found",
        message="This digital card doesn&#x27;t exist or has been deactivated.",
    )
