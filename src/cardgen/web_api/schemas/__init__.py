"""
Pydantic Schemas
===============
Request and response models for the API.
"""
from .render import CardMetadata, RenderRequestBody

__all__ = ["CardMetadata", "RenderRequestBody"]
