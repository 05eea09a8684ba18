"""SessionView - read-only snapshot handed to the presentation layer."""

from typing import Optional

from pydantic import BaseModel, Field

from moodlog.models.history import HistoryRecord
from moodlog.models.mood import MoodEntry


class SessionView(BaseModel):
    """Everything a screen needs to render one frame."""

    visible_catalog: list[MoodEntry] = Field(default_factory=list)
    selected: Optional[MoodEntry] = Field(default=None)
    streak: int = Field(..., ge=1)
    search_query: str = Field(default="")
    logged_today: bool = Field(default=False)
    reminder: Optional[str] = Field(default=None, description="Banner text when nothing logged today")
    frequency: dict[str, int] = Field(default_factory=dict)
    most_frequent: Optional[str] = Field(default=None)
    total_logged: int = Field(default=0, ge=0)
    history: list[HistoryRecord] = Field(default_factory=list)
    toast: Optional[str] = Field(default=None)
    confetti: bool = Field(default=False)

    model_config = {"frozen": True}
