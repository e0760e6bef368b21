"""
Visitor document model
"""

from datetime import datetime, timezone
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class VisitorRecord(BaseModel):
    """One check-in entry as stored in the visitors collection"""

    model_config = ConfigDict(frozen=True)

    name: str
    reason: str
    photo: str = ""      # data URL (optional)
    signature: str = ""  # data URL (optional)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_document(self) -> Dict[str, Any]:
        """Document for insertion; the store assigns `_id`"""
        return self.model_dump()
