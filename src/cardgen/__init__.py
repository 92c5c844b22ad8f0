"""cardgen: static renderer for positioned digital contact cards."""

__all__ = [
    "__version__",
    "render_card",
    "render_html",
    "render_batch",
    "resolve_card",
    "load_request",
    "decode_payload",
    "RenderRequest",
    "RenderConfig",
]
__version__ = "0.1.0"

# Programmatic entrypoints.
from cardgen.api import (  # noqa: E402, F401
    decode_payload,
    load_request,
    render_batch,
    render_card,
    render_html,
    resolve_card,
)
from cardgen.core.config import RenderConfig  # noqa: E402, F401
from cardgen.model.request import RenderRequest  # noqa: E402, F401
