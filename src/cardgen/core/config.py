"""Render configuration dataclass."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """Immutable render configuration.

    Holds the external URLs a rendered card links to and the canvas size
    all element geometry is expressed in.
    """

    app_url: str = "https://app.supremetech.contact"
    live_base_url: str = "https://cards.supremetech.contact"
    placeholder_base_url: str = "https://ui-avatars.com/api/"
    canvas_width: int = 390
    canvas_height: int = 720

    @classmethod
    def from_env(cls) -> RenderConfig:
        """Build a config from ``CARDGEN_*`` environment variables.

        ``APP_URL`` is honoured as a fallback for ``CARDGEN_APP_URL`` so an
        existing build environment keeps working.
        """
        defaults = cls()
        return cls(
            app_url=(
                os.getenv("CARDGEN_APP_URL")
                or os.getenv("APP_URL")
                or defaults.app_url
            ).rstrip("/"),
            live_base_url=(
                os.getenv("CARDGEN_LIVE_BASE_URL") or defaults.live_base_url
            ).rstrip("/"),
            placeholder_base_url=(
                os.getenv("CARDGEN_PLACEHOLDER_URL") or defaults.placeholder_base_url
            ),
            canvas_width=int(
                os.getenv("CARDGEN_CANVAS_WIDTH") or defaults.canvas_width
            ),
            canvas_height=int(
                os.getenv("CARDGEN_CANVAS_HEIGHT") or defaults.canvas_height
            ),
        )


DEFAULT_CONFIG = RenderConfig()
