"""
Pydantic data models for the fiscal dates helpers.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class DateRange(BaseModel):
    """A start/end pair of formatted date strings with an optional label"""

    date_from: str = Field(description="Formatted start date")
    date_to: str = Field(description="Formatted end date")
    label: Optional[str] = Field(default=None, description="Human-readable range label")

    @field_validator('date_from', 'date_to')
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError('Range dates cannot be blank')
        return v

    def to_list(self) -> List[str]:
        """Return ``[date_from, date_to]``."""
        return [self.date_from, self.date_to]
