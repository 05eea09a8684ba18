"""HistoryRecord data model."""

from datetime import datetime

from pydantic import BaseModel, Field


class HistoryRecord(BaseModel):
    """An immutable snapshot of one logged mood."""

    mood_label: str = Field(..., min_length=1, description="Label of the mood at logging time")
    timestamp: datetime = Field(
        default_factory=datetime.now, description="When the mood was logged"
    )
    note: str = Field(default="", description="Optional journal note")

    model_config = {"frozen": True}

    @property
    def date_text(self) -> str:
        """Date without zero padding, e.g. 2024-3-7."""
        ts = self.timestamp
        return f"{ts.year}-{ts.month}-{ts.day}"

    @property
    def time_text(self) -> str:
        return self.timestamp.strftime("%H:%M:%S")
