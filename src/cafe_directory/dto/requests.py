"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field


class CafeQuery(BaseModel):
    """Query parameters of GET /cafe.

    All fields are kept as raw text; the service layer decides what is
    valid so that errors come back as the fixed plain-text messages
    instead of a validation payload.
    """

    city: str | None = Field(None, description="City key, e.g. 'moscow'")
    count: str | None = Field(None, description="Maximum number of cafés to return (integer >= 0)")
    search: str = Field("", description="Case-insensitive substring of the café name")
