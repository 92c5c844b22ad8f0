"""Action resolution: element data source + action kind → link target.

Two independent steps:

1. **value lookup**: ``action_source`` names the contact value to use
   (phone, email, website, a social platform URL, or the element's own
   custom value).  Without a source, the value is derived from
   ``action_type`` instead.
2. **scheme wrapping**: ``action_type`` decides the URI scheme
   (``tel:``, ``sms:``, ``mailto:``, otherwise ``https://`` unless the
   value already carries a protocol).

An unresolvable value yields the inert ``"#"`` link, never an error.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from cardgen.core.fallback import first_present
from cardgen.model import ActionType
from cardgen.model.elements import ActionElement
from cardgen.model.request import RenderRequest

INERT_HREF = "#"

_PROTOCOL_RE = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.\-]*://|mailto:|tel:|sms:)")

_Lookup = Callable[[ActionElement, RenderRequest], Optional[str]]


def _phone(el: ActionElement, req: RenderRequest) -> Optional[str]:
    return first_present(
        lambda: req.business and req.business.phone,
        lambda: req.profile and req.profile.phone,
        default=None,
    )


def _contact_email(el: ActionElement, req: RenderRequest) -> Optional[str]:
    return first_present(
        lambda: req.profile and req.profile.work_email,
        lambda: req.profile and req.profile.email,
        default=None,
    )


def _profile_email(el: ActionElement, req: RenderRequest) -> Optional[str]:
    return req.profile.email if req.profile else None


def _company_email(el: ActionElement, req: RenderRequest) -> Optional[str]:
    return req.business.email if req.business else None


def _website(el: ActionElement, req: RenderRequest) -> Optional[str]:
    return req.business.website if req.business else None


def _custom(el: ActionElement, req: RenderRequest) -> Optional[str]:
    return el.custom_value


def _social(platform: str) -> _Lookup:
    def lookup(el: ActionElement, req: RenderRequest) -> Optional[str]:
        if req.social_profile is None:
            return None
        return req.social_profile.url_for(platform)

    return lookup


SOURCE_LOOKUPS: Mapping[str, _Lookup] = MappingProxyType({
    "profile_phone": _phone,
    "personal_phone": _phone,
    "business_phone": _phone,
    "profile_email": _contact_email,
    "personal_email": _contact_email,
    "user_login_email": _contact_email,
    "business_email": _contact_email,
    "company_email": _company_email,
    "company_website": _website,
    "business_website": _website,
    "social_linkedin": _social("linkedin"),
    "social_twitter": _social("twitter"),
    "social_facebook": _social("facebook"),
    "social_instagram": _social("instagram"),
    "social_youtube": _social("youtube"),
    "social_github": _social("github"),
    "custom": _custom,
})

# Used when the element names no (known) source; other types use the custom value.
TYPE_LOOKUPS: Mapping[str, _Lookup] = MappingProxyType({
    ActionType.CALL.value: _phone,
    ActionType.SMS.value: _phone,
    ActionType.EMAIL.value: _profile_email,
    ActionType.WEBSITE.value: _website,
    ActionType.LINK.value: _custom,
})

_SCHEMES: Mapping[str, str] = MappingProxyType({
    ActionType.CALL.value: "tel:",
    ActionType.SMS.value: "sms:",
    ActionType.EMAIL.value: "mailto:",
})


def resolve_action_value(element: ActionElement, request: RenderRequest) -> Optional[str]:
    """Select the raw contact value *element* points at, if any."""
    lookup = SOURCE_LOOKUPS.get(element.action_source or "")
    if lookup is None:
        lookup = TYPE_LOOKUPS.get(element.action_type or "", _custom)
    value = lookup(element, request)
    if value is None or not str(value).strip():
        return None
    return str(value).strip()


def wrap_action_value(value: Optional[str], action_type: Optional[str]) -> str:
    """Turn a raw value into a URI according to *action_type*."""
    if not value:
        return INERT_HREF
    scheme = _SCHEMES.get(action_type or "")
    if scheme is not None:
        return f"{scheme}{value}"
    if _PROTOCOL_RE.match(value):
        return value
    return f"https://{value}"


def action_href(element: ActionElement, request: RenderRequest) -> str:
    return wrap_action_value(
        resolve_action_value(element, request), element.action_type
    )


def is_external(href: str) -> bool:
    """True for targets that should open in a new browsing context."""
    return href.startswith(("http://", "https://"))
