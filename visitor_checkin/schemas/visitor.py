"""
Visitor Pydantic schemas
"""

from pydantic import BaseModel
from typing import Optional


class VisitorCreate(BaseModel):
    """Visitor submission schema

    Every field is optional at the schema level so that a missing name or
    reason is answered with the endpoint's own 400 message rather than a
    generic validation error.
    """
    name: Optional[str] = None
    reason: Optional[str] = None
    photo: Optional[str] = None
    signature: Optional[str] = None

    def missing_required(self) -> bool:
        """True when name or reason is absent or empty"""
        return not self.name or not self.reason


class MessageResponse(BaseModel):
    """Acknowledgment schema"""
    message: str


class ErrorResponse(MessageResponse):
    """Persistence failure schema"""
    error: str
