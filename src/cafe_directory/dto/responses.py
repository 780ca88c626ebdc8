"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class CitiesResponse(BaseModel):
    """Response DTO for the supported cities listing."""

    cities: list[str] = Field(default_factory=list, description="Supported city keys, sorted")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cities: int = Field(..., description="Number of cities loaded in the directory", ge=0)
