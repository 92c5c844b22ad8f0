"""Tests for per-element HTML fragments."""

from __future__ import annotations

from cardgen.core.resolver import resolve_card
from cardgen.model.elements import UnknownElement, parse_element
from cardgen.model.request import RenderRequest
from cardgen.render.elements import ELEMENT_RENDERERS, base_style, render_element


_RECORD = {
    "card": {"public_slug": "jane"},
    "profile": {"first_name": "Jane", "last_name": "Doe", "job_title": "CTO", "phone": "555-0000"},
    "business": {
        "name": "Acme & Sons",
        "phone": "555-1234",
        "website": "acme.example",
        "logo_url": "https://cdn.example/logo.png",
    },
    "template": {"color_scheme": {"primary": "#111111", "secondary": "#222222", "text": "#333333"}},
}


def _render(raw_element: dict, record: dict | None = None) -> str:
    req = RenderRequest.from_dict(record if record is not None else _RECORD)
    el = parse_element(raw_element)
    return render_element(el, resolve_card(req), req)


def _el(type_name: str, **extra) -> dict:
    raw = {"id": f"{type_name}-1", "type": type_name, "x": 10, "y": 20, "width": 100, "height": 40, "zIndex": 2}
    raw.update(extra)
    return raw


# ════════════════════════════════════════════════════════════════════
# Shared geometry and dispatch
# ════════════════════════════════════════════════════════════════════


class TestDispatch:
    def test_base_style(self):
        el = parse_element(_el("name"))
        assert base_style(el) == (
            "position:absolute;left:10px;top:20px;width:100px;height:40px;z-index:2;"
        )

    def test_every_known_variant_is_registered(self):
        from cardgen.model.elements import ELEMENT_TYPES

        assert set(ELEMENT_TYPES.values()) == set(ELEMENT_RENDERERS)

    def test_unknown_renders_nothing(self):
        assert _render(_el("hologram")) == ""
        req = RenderRequest.from_dict(_RECORD)
        assert render_element(UnknownElement(id="x", type_name="x"), resolve_card(req), req) == ""

    def test_geometry_on_every_fragment(self):
        html = _render(_el("divider"))
        assert "left:10px;top:20px;width:100px;height:40px;z-index:2;" in html


# ════════════════════════════════════════════════════════════════════
# Text
# ════════════════════════════════════════════════════════════════════


class TestText:
    def test_name_defaults(self):
        html = _render(_el("name"))
        assert ">Jane Doe</span>" in html
        assert "font-size:20px;" in html
        assert "font-weight:bold;" in html
        assert "color:#333333;" in html
        assert "opacity" not in html

    def test_title_and_company_opacity(self):
        title = _render(_el("title"))
        assert ">CTO</span>" in title
        assert "opacity:0.85;" in title
        assert "font-size:14px;" in title
        company = _render(_el("company"))
        assert "opacity:0.75;" in company
        assert "font-weight:500;" in company

    def test_company_is_escaped(self):
        assert ">Acme &amp; Sons</span>" in _render(_el("company"))

    def test_alignment_and_tokens(self):
        html = _render(_el("name", textAlign="right", fontSize="3xl", textColor="#abcdef"))
        assert "justify-content:flex-end;" in html
        assert "font-size:32px;" in html
        assert "color:#abcdef;" in html

    def test_bio(self):
        record = dict(_RECORD, card={"public_slug": "jane", "custom_bio": "Line one\n<b>two</b>"})
        html = _render(_el("bio"), record)
        assert "white-space:pre-wrap;" in html
        assert "font-size:13px;" in html
        assert "text-align:center;" in html
        assert "&lt;b&gt;two&lt;/b&gt;" in html

    def test_free_text(self):
        html = _render(_el("text", customValue="Hello <world>"))
        assert "Hello &lt;world&gt;" in html
        assert "text-align:left;" in html
        assert "font-size:16px;" in html


# ════════════════════════════════════════════════════════════════════
# Avatar and decoration
# ════════════════════════════════════════════════════════════════════


class TestAvatar:
    def test_initials_when_no_photo(self):
        html = _render(_el("avatar", height=80))
        assert ">JD</span>" in html
        assert "font-size:28px;" in html
        assert "border-radius:9999px;" in html
        assert "background:#111111;" in html

    def test_photo(self):
        record = dict(_RECORD, card={"public_slug": "jane", "custom_fields": {"profile_photo_url": "me.png"}})
        html = _render(_el("avatar"), record)
        assert '<img src="me.png" alt="Jane Doe"' in html

    def test_border(self):
        html = _render(_el("avatar", borderWidth=3, borderColor="#fff", borderRadius="lg"))
        assert "border:3px solid #fff;" in html
        assert "border-radius:12px;" in html


class TestDecoration:
    def test_image_without_url_is_omitted(self):
        assert _render(_el("image")) == ""

    def test_image_opacity(self):
        html = _render(_el("image", imageUrl="https://x/p.png", opacity=50))
        assert 'src="https://x/p.png"' in html
        assert "opacity:0.5;" in html

    def test_company_logo_prefers_business_logo(self):
        html = _render(_el("image", id="company_logo", imageUrl="https://x/fallback.png"))
        assert 'src="https://cdn.example/logo.png"' in html

    def test_company_logo_falls_back_to_element_url(self):
        record = dict(_RECORD, business={"name": "Acme"})
        html = _render(_el("image", id="company_logo", imageUrl="https://x/fallback.png"), record)
        assert 'src="https://x/fallback.png"' in html

    def test_color_block_defaults_to_secondary(self):
        html = _render(_el("color_block"))
        assert "background:#222222;" in html
        assert "opacity:1;" in html

    def test_divider_default_opacity(self):
        html = _render(_el("divider"))
        assert "opacity:0.2;" in html
        assert "background:#333333;" in html


# ════════════════════════════════════════════════════════════════════
# Links
# ════════════════════════════════════════════════════════════════════


class TestLinks:
    def test_call_button(self):
        html = _render(_el("action_button", actionType="call", label="Call", icon="phone"))
        assert html.startswith('<a href="tel:555-1234"')
        assert "target=" not in html
        assert "<span>Call</span>" in html
        assert "<svg" in html

    def test_website_button_opens_new_context(self):
        html = _render(_el("button_primary", actionType="website", label="Visit"))
        assert 'href="https://acme.example"' in html
        assert 'target="_blank" rel="noopener noreferrer"' in html
        assert "background:#111111;" in html

    def test_secondary_button_background(self):
        html = _render(_el("button_secondary", actionType="link", customValue="x.example"))
        assert "background:#222222;" in html

    def test_icon_only_hides_label(self):
        html = _render(_el("action_button", actionType="call", label="Call", icon="phone", iconOnly=True))
        assert "<span>Call</span>" not in html
        assert "gap:0px;" in html

    def test_unresolved_action_is_inert(self):
        html = _render(_el("button_primary", actionType="email", label="Mail"))
        assert html.startswith('<a href="#"')

    def test_social_icon(self):
        record = dict(_RECORD, socialProfile={"linkedin_url": "https://linkedin.com/in/jane"})
        html = _render(
            _el("social_icon", platform="linkedin", actionSource="social_linkedin", iconSize="lg"),
            record,
        )
        assert 'href="https://linkedin.com/in/jane"' in html
        assert 'width="24" height="24"' in html
        assert "color:#111111;" in html

    def test_href_is_escaped(self):
        html = _render(_el("action_button", actionType="link", customValue='x.example/"><script>'))
        assert "<script>" not in html
        assert "&quot;&gt;&lt;script&gt;" in html
