"""Tests for action value lookup and URI scheme wrapping."""

from __future__ import annotations

import pytest

from cardgen.model import ActionType
from cardgen.model.elements import ActionButtonElement, SocialIconElement, parse_element
from cardgen.model.request import RenderRequest
from cardgen.render.actions import (
    INERT_HREF,
    TYPE_LOOKUPS,
    action_href,
    is_external,
    resolve_action_value,
    wrap_action_value,
)


# ── helpers ──────────────────────────────────────────────────────────


def _request(**records) -> RenderRequest:
    raw = {"card": {"public_slug": "jane"}}
    raw.update(records)
    return RenderRequest.from_dict(raw)


_FULL = _request(
    profile={
        "first_name": "Jane",
        "email": "jane@home.example",
        "work_email": "jane@work.example",
        "phone": "555-0000",
    },
    business={
        "name": "Acme",
        "phone": "555-1234",
        "email": "hello@acme.example",
        "website": "acme.example",
    },
    socialProfile={
        "linkedin_url": "https://linkedin.com/in/jane",
        "github_url": "https://github.com/jane",
    },
)


def _button(**fields) -> ActionButtonElement:
    return ActionButtonElement(id="btn", **fields)


# ════════════════════════════════════════════════════════════════════
# Value lookup by action source
# ════════════════════════════════════════════════════════════════════


class TestSourceLookup:
    @pytest.mark.parametrize("source", ["profile_phone", "personal_phone", "business_phone"])
    def test_phone_sources_prefer_business(self, source):
        assert resolve_action_value(_button(action_source=source), _FULL) == "555-1234"

    def test_phone_falls_back_to_profile(self):
        req = _request(profile={"phone": "555-0000"}, business={"name": "Acme"})
        assert resolve_action_value(_button(action_source="business_phone"), req) == "555-0000"

    @pytest.mark.parametrize(
        "source",
        ["profile_email", "personal_email", "user_login_email", "business_email"],
    )
    def test_email_sources_prefer_work_email(self, source):
        assert resolve_action_value(_button(action_source=source), _FULL) == "jane@work.example"

    def test_email_falls_back_to_profile_email(self):
        req = _request(profile={"email": "jane@home.example"})
        assert resolve_action_value(_button(action_source="profile_email"), req) == "jane@home.example"

    def test_company_email(self):
        assert resolve_action_value(_button(action_source="company_email"), _FULL) == "hello@acme.example"

    @pytest.mark.parametrize("source", ["company_website", "business_website"])
    def test_website_sources(self, source):
        assert resolve_action_value(_button(action_source=source), _FULL) == "acme.example"

    def test_social_source(self):
        el = _button(action_source="social_linkedin")
        assert resolve_action_value(el, _FULL) == "https://linkedin.com/in/jane"

    def test_social_source_without_profile(self):
        el = _button(action_source="social_twitter")
        assert resolve_action_value(el, _request()) is None

    def test_custom_source(self):
        el = _button(action_source="custom", custom_value="https://cal.example/jane")
        assert resolve_action_value(el, _FULL) == "https://cal.example/jane"


# ════════════════════════════════════════════════════════════════════
# Value lookup by action type (no source)
# ════════════════════════════════════════════════════════════════════


class TestTypeLookup:
    @pytest.mark.parametrize("action_type", ["call", "sms"])
    def test_call_and_sms_use_phone(self, action_type):
        assert resolve_action_value(_button(action_type=action_type), _FULL) == "555-1234"

    def test_email_uses_plain_profile_email(self):
        assert resolve_action_value(_button(action_type="email"), _FULL) == "jane@home.example"

    def test_website_uses_business_website(self):
        assert resolve_action_value(_button(action_type="website"), _FULL) == "acme.example"

    def test_other_type_uses_custom_value(self):
        el = _button(action_type="link", custom_value="example.org/x")
        assert resolve_action_value(el, _FULL) == "example.org/x"

    def test_every_action_type_has_a_lookup(self):
        assert set(TYPE_LOOKUPS) == {t.value for t in ActionType}

    def test_unknown_source_falls_back_to_type(self):
        el = _button(action_source="fax_machine", action_type="call")
        assert resolve_action_value(el, _FULL) == "555-1234"

    def test_blank_value_is_unresolved(self):
        el = _button(action_type="link", custom_value="   ")
        assert resolve_action_value(el, _FULL) is None


# ════════════════════════════════════════════════════════════════════
# Scheme wrapping and full href
# ════════════════════════════════════════════════════════════════════


class TestHref:
    def test_call(self):
        req = _request(business={"phone": "555-1234"})
        assert action_href(_button(action_type="call"), req) == "tel:555-1234"

    def test_sms(self):
        assert wrap_action_value("555-1234", "sms") == "sms:555-1234"

    def test_email(self):
        assert wrap_action_value("a@b.example", "email") == "mailto:a@b.example"

    def test_email_without_value_is_inert(self):
        assert action_href(_button(action_type="email"), _request()) == INERT_HREF == "#"

    def test_website_gets_https(self):
        req = _request(business={"website": "example.com"})
        assert action_href(_button(action_type="website"), req) == "https://example.com"

    def test_existing_protocol_is_unchanged(self):
        assert wrap_action_value("https://x.com", "website") == "https://x.com"
        assert wrap_action_value("http://x.com", None) == "http://x.com"
        assert wrap_action_value("mailto:a@b.example", "link") == "mailto:a@b.example"

    def test_no_type_and_bare_value(self):
        assert wrap_action_value("example.com/page", None) == "https://example.com/page"

    def test_social_icon_uses_same_resolution(self):
        el = parse_element({
            "id": "gh",
            "type": "social_icon",
            "platform": "github",
            "actionSource": "social_github",
            "actionType": "link",
        })
        assert isinstance(el, SocialIconElement)
        assert action_href(el, _FULL) == "https://github.com/jane"

    def test_is_external(self):
        assert is_external("https://x.com")
        assert is_external("http://x.com")
        assert not is_external("tel:555")
        assert not is_external("#")
