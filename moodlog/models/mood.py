"""MoodEntry data model."""

from pydantic import BaseModel, Field


class MoodEntry(BaseModel):
    """A selectable mood in the catalog."""

    id: int = Field(..., ge=1, description="Stable identifier within the session")
    label: str = Field(..., min_length=1, description="Display label (emoji + name)")
    description: str = Field(..., min_length=1, description="What the mood means")
    tip: str = Field(..., description="Coping tip shown when selected")
    is_favorite: bool = Field(default=False, description="Pinned to the top of the list")
    is_custom: bool = Field(default=False, description="User-added, and therefore deletable")

    model_config = {"frozen": True}

    def toggled(self) -> "MoodEntry":
        """Return a copy with the favorite flag flipped."""
        return self.model_copy(update={"is_favorite": not self.is_favorite})
