"""
Domain exceptions and the error payload rendered for them
"""
from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class ResourceNotFoundError(Exception):
    """Referenced record does not exist or is no longer active"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ExceptionResponse(BaseModel):
    """Error body returned by the HTTP layer for raised errors"""
    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    success: bool = False
    message: str
    details: str

    @classmethod
    def for_request(cls, message: str, path: str, timestamp: datetime) -> "ExceptionResponse":
        return cls(timestamp=timestamp, message=message, details=f"uri={path}")

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")
