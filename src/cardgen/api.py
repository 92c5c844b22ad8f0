"""
cardgen.api
===========

Programmatic entrypoints for rendering cards.

Goals:
  - No argparse / CLI dependencies
  - Pure: ``render_card(request)`` is a function of its input only
  - Byte-identical output for identical input

Non-goals:
  - Fetching card records (callers hand over decoded JSON)
  - Writing files: callers decide where pages go

Usage::

    from cardgen.api import load_request, render_card

    rendered = render_card(load_request(record))
    Path(f"{rendered.output_name}.html").write_text(rendered.html)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

import jsonschema

from cardgen.contracts.load import (
    CARDS_PAYLOAD_SCHEMA,
    RENDER_REQUEST_SCHEMA,
    validate_instance,
)
from cardgen.core.config import DEFAULT_CONFIG, RenderConfig
from cardgen.core.fallback import is_present
from cardgen.core.resolver import ResolvedCard, resolve_card
from cardgen.errors import PayloadError, RequestError
from cardgen.model.elements import stacking_order
from cardgen.model.request import RenderRequest
from cardgen.render.document import render_document
from cardgen.render.elements import render_element

_logger = logging.getLogger(__name__)

__all__ = [
    "BatchResult",
    "RenderedCard",
    "decode_payload",
    "load_request",
    "render_batch",
    "render_card",
    "render_html",
    "resolve_card",
]


@dataclass(frozen=True, slots=True)
class RenderedCard:
    """One finished page and the name the file writer should save it under."""

    output_name: Optional[str]
    html: str


@dataclass(slots=True)
class BatchResult:
    """Outcome of :func:`render_batch`."""

    pages: list[RenderedCard] = field(default_factory=list)
    skipped: int = 0
    errors: int = 0

    @property
    def generated(self) -> int:
        return len(self.pages)


# ── single card ─────────────────────────────────────────────────────


def load_request(raw: Any, *, validate: bool = False) -> RenderRequest:
    """Parse one raw card record into a ``RenderRequest``.

    Raises
    ------
    RequestError
        If *raw* is not an object, fails schema validation (when
        *validate* is set) or carries malformed element geometry.
    """
    if not isinstance(raw, Mapping):
        raise RequestError(f"card record must be an object, got {type(raw).__name__}")
    if validate:
        try:
            validate_instance(raw, RENDER_REQUEST_SCHEMA)
        except jsonschema.ValidationError as e:
            raise RequestError(f"card record violates schema: {e.message}") from e
    try:
        return RenderRequest.from_dict(raw)
    except (TypeError, ValueError) as e:
        raise RequestError(f"malformed card record: {e}") from e


def render_html(request: RenderRequest, *, config: RenderConfig = DEFAULT_CONFIG) -> str:
    """Render *request* to a complete HTML document."""
    card = resolve_card(request, config)
    fragments = [
        render_element(el, card, request)
        for el in stacking_order(request.elements)
    ]
    return render_document(card, fragments, config)


def render_card(request: RenderRequest, *, config: RenderConfig = DEFAULT_CONFIG) -> RenderedCard:
    return RenderedCard(
        output_name=request.card.output_name,
        html=render_html(request, config=config),
    )


# ── batches ─────────────────────────────────────────────────────────


def decode_payload(payload: Any) -> list[Mapping[str, Any]]:
    """Extract the card records from a listing payload.

    Raises
    ------
    PayloadError
        If the payload carries an ``error`` field, is not an object, or its
        ``cards`` value is not a list.
    """
    if not isinstance(payload, Mapping):
        raise PayloadError(f"payload must be an object, got {type(payload).__name__}")
    error = payload.get("error")
    if error:
        raise PayloadError(f"card source reported an error: {error}")
    try:
        validate_instance(payload, CARDS_PAYLOAD_SCHEMA)
    except jsonschema.ValidationError as e:
        raise PayloadError(f"payload violates schema: {e.message}") from e
    return list(payload.get("cards") or [])


def render_batch(
    cards: Iterable[Any],
    *,
    config: RenderConfig = DEFAULT_CONFIG,
    validate: bool = False,
) -> BatchResult:
    """Render every publishable card in *cards*.

    A record without a public slug is skipped; a record that fails to
    parse or render is logged and counted.  Neither stops the batch.
    """
    result = BatchResult()
    for index, raw in enumerate(cards):
        card_raw = raw.get("card") if isinstance(raw, Mapping) else None
        slug = card_raw.get("public_slug") if isinstance(card_raw, Mapping) else None
        if not is_present(slug):
            _logger.info("Card #%d has no public slug, skipped", index)
            result.skipped += 1
            continue
        try:
            request = load_request(raw, validate=validate)
            result.pages.append(render_card(request, config=config))
        except Exception as e:
            _logger.warning("Card '%s' failed to render: %s", slug, e)
            result.errors += 1
            continue
        _logger.debug("Rendered card '%s'", slug)
    return result
