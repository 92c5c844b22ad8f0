"""
FastAPI Application
==================
Preview service: render a card record on demand, without the batch build.

Run with:
    uvicorn cardgen.web_api.main:app --reload
"""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cardgen import __version__
from cardgen.errors import RequestError
from cardgen.web_api.config import settings
from cardgen.web_api.routers import health, render

_logger = logging.getLogger(__name__)

app = FastAPI(
    title="Card Render API",
    description="Render digital contact cards to static HTML",
    version=__version__,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(health.router, tags=["Health"])
app.include_router(render.router, prefix="/render", tags=["Render"])


@app.exception_handler(RequestError)
async def request_error_handler(request: Request, exc: RequestError):
    """A card record that cannot be parsed is the client's problem."""
    _logger.info("Rejected card record on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/")
async def root():
    """Root endpoint - API info"""
    return {
        "name": "Card Render API",
        "version": __version__,
        "docs": "/docs" if settings.DEBUG else "disabled",
    }


# For running directly: python -m cardgen.web_api.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
