"""Exception hierarchy for cardgen.

The rendering core itself never raises for missing data; every resolution
step degrades to a documented default.  These types cover the collaborator
boundaries: payload decoding and request parsing.
"""

from __future__ import annotations


class CardgenError(Exception):
    """Base class for all cardgen errors."""


class PayloadError(CardgenError):
    """The card payload is unusable as a whole (explicit error, bad shape).

    Fatal to a batch build.
    """


class RequestError(CardgenError):
    """A single card record could not be parsed into a ``RenderRequest``.

    Counted per card by ``render_batch``; never aborts sibling cards.
    """
