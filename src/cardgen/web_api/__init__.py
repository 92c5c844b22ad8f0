"""
Card Render Web API
===================
FastAPI-based preview service for card pages.

Quick Start:
    uvicorn cardgen.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
