from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ExtractRequest(BaseModel):
    # Optional so a missing url reaches the handler and becomes a BadRequest
    url: Optional[str] = None


class PropertyData(BaseModel):
    """Figures for one listing. Public names are the German wire fields."""

    model_config = ConfigDict(frozen=True)

    kaufpreis: Optional[int] = None
    miete: Optional[int] = None
    nebenkosten: Optional[int] = None
    renovierung: Optional[int] = None
    grundsteuer: Optional[int] = None
    verwaltung: Optional[int] = None
    # scraped but not part of the response payload
    wohnflaeche: Optional[float] = Field(default=None, exclude=True)
    zimmer: Optional[float] = Field(default=None, exclude=True)


class HealthResponse(BaseModel):
    status: str = "ok"
    message: str


class ErrorResponse(BaseModel):
    error: str
