"""Enums shared across the model and render layers."""

from __future__ import annotations

from enum import Enum


class ElementKind(str, Enum):
    """Canonical layout element tags, as stored in ``layout_config``."""

    AVATAR = "avatar"
    NAME = "name"
    TITLE = "title"
    COMPANY = "company"
    BIO = "bio"
    IMAGE = "image"
    COLOR_BLOCK = "color_block"
    ACTION_BUTTON = "action_button"
    BUTTON_PRIMARY = "button_primary"
    BUTTON_SECONDARY = "button_secondary"
    SOCIAL_ICON = "social_icon"
    DIVIDER = "divider"
    TEXT = "text"
    UNKNOWN = "unknown"


class ActionType(str, Enum):
    """How a resolved action value is wrapped into a link."""

    CALL = "call"
    SMS = "sms"
    EMAIL = "email"
    WEBSITE = "website"
    LINK = "link"
