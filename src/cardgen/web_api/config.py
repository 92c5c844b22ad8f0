"""
Configuration settings for the preview API.

Every field can be overridden by a ``CARDGEN_API_<FIELD>`` environment
variable (``CARDGEN_API_PORT=9000``).  Render settings (base URLs, canvas
size) are not duplicated here; they come from ``RenderConfig.from_env``.
"""
import os
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, List

ENV_PREFIX = "CARDGEN_API_"


def _as_bool(raw: str) -> bool:
    return raw.strip().lower() in ("true", "1", "yes")


def _as_list(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


_PARSERS: Dict[Any, Callable[[str], Any]] = {
    bool: _as_bool,
    int: int,
    List[str]: _as_list,
}


@dataclass
class Settings:
    """Preview API configuration"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # Schema-check request bodies before rendering
    VALIDATE_REQUESTS: bool = True

    # Cache-Control max-age for rendered pages; 0 sends no-store
    CACHE_SECONDS: int = 0

    def __post_init__(self):
        """Apply environment overrides"""
        for f in fields(self):
            raw = os.getenv(ENV_PREFIX + f.name)
            if raw is None:
                continue
            parser = _PARSERS.get(f.type, str)
            setattr(self, f.name, parser(raw))

    @property
    def cache_control(self) -> str:
        if self.CACHE_SECONDS <= 0:
            return "no-store"
        return f"public, max-age={self.CACHE_SECONDS}"


# Global settings instance
settings = Settings()
