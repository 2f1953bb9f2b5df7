from datetime import datetime, timezone

from pydantic import Field

from app.schemas.base import CamelModel


class ErrorResponse(CamelModel):
    error_code: str
    message: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
