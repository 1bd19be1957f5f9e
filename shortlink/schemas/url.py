"""
URL Schemas.

Pydantic schemas for the URL endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field


class ShortenRequest(BaseModel):
    """Request body for POST /urls/shorten."""

    long_url: str = Field(alias="longUrl", description="URL to shorten")
    user_id: str = Field(alias="userId", description="Owner of the new short URL")

    model_config = ConfigDict(populate_by_name=True)


class ShortUrlRecord(BaseModel):
    """Read-only view of a short URL as listed by the backend."""

    id: str = Field(description="Record identifier")
    long_url: str = Field(alias="longUrl", description="Original URL")
    short_code: str = Field(alias="shortCode", description="Code appended to the short host")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")
