"""
Health Check Router
==================
Endpoints for health checks and readiness probes.
"""
from fastapi import APIRouter

from cardgen import __version__
from cardgen.contracts.load import RENDER_REQUEST_SCHEMA, load_schema

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check():
    """
    Readiness check endpoint.
    Ready once the bundled request schema can be loaded.
    """
    load_schema(RENDER_REQUEST_SCHEMA)
    return {"status": "ready"}
