"""
Render Router
=============
Endpoints for rendering a single card.

``RequestError`` raised while loading a body is turned into a 422 by the
application-level handler in ``cardgen.web_api.main``.
"""
from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from cardgen import api as core_api
from cardgen.core.config import RenderConfig
from cardgen.model.request import RenderRequest
from cardgen.web_api.config import settings
from cardgen.web_api.schemas.render import CardMetadata, RenderRequestBody

router = APIRouter()

_config = RenderConfig.from_env()


def _load(body: RenderRequestBody) -> RenderRequest:
    return core_api.load_request(body.to_record(), validate=settings.VALIDATE_REQUESTS)


@router.post("", response_class=HTMLResponse)
async def render_card(body: RenderRequestBody):
    """
    Render one card record to a complete HTML page.
    """
    html = core_api.render_html(_load(body), config=_config)
    return HTMLResponse(html, headers={"Cache-Control": settings.cache_control})


@router.post("/metadata", response_model=CardMetadata)
async def card_metadata(body: RenderRequestBody):
    """
    Resolve the share metadata (OG title, description, image, links) for a card.
    """
    card = core_api.resolve_card(_load(body), _config)
    return CardMetadata(
        output_name=card.output_name,
        title=card.og_title,
        description=card.og_description,
        image=card.og_image,
        canonical_url=card.canonical_url,
        favicon_url=card.favicon_url,
        theme_color=card.theme_color,
        site_name=card.site_name,
    )
