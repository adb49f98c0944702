"""API request/response schemas."""
from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response for /healthz and /readyz."""

    status: str  # "ok" | "degraded"
    service: str = ""


class FormatRequest(BaseModel):
    instructions: str
    clipboard_content: str


class FormatResponse(BaseModel):
    response: str | None = None
    status_code: int
