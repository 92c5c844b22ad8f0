"""
Render Schemas
==============
Request and response models for render endpoints.
"""
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any


class RenderRequestBody(BaseModel):
    """One card record, as produced by the card listing endpoint"""

    card: Optional[Dict[str, Any]] = Field(default=None, description="Per-card overrides, slug/token")
    profile: Optional[Dict[str, Any]] = Field(default=None, description="Person identity")
    business: Optional[Dict[str, Any]] = Field(default=None, description="Organization identity")
    template: Optional[Dict[str, Any]] = Field(default=None, description="Layout config and color scheme")
    social_profile: Optional[Dict[str, Any]] = Field(
        default=None,
        alias="socialProfile",
        description="Social network URLs (<platform>_url keys)",
    )

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "card": {"public_slug": "jane-doe"},
                "profile": {"first_name": "Jane", "last_name": "Doe", "job_title": "CTO"},
                "business": {"name": "Acme", "phone": "555-1234"},
                "template": {"layout_config": {"elements": []}},
                "socialProfile": {"linkedin_url": "https://linkedin.com/in/jane"},
            }
        }

    def to_record(self) -> Dict[str, Any]:
        """Back to the raw record shape ``load_request`` accepts."""
        return self.model_dump(by_alias=True, exclude_none=True)


class CardMetadata(BaseModel):
    """Resolved share metadata for one card"""

    output_name: Optional[str] = Field(default=None)
    title: str
    description: str
    image: str
    canonical_url: str
    favicon_url: str
    theme_color: str
    site_name: str
