"""Error response model."""

from datetime import datetime
from typing import Optional, Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Structured API error response."""

    error_code: str = Field(description="Error code (e.g. ERR_INPUT_001)")
    message: str = Field(description="User-facing message")
    details: Optional[Any] = Field(default=None, description="Additional details")
    timestamp: datetime = Field(default_factory=datetime.now, description="When the error occurred")
