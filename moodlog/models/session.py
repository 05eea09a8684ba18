"""SessionState model - the single owner of all mutable session data."""

from typing import Optional

from pydantic import BaseModel, Field

from moodlog.models.history import HistoryRecord
from moodlog.models.mood import MoodEntry


class SessionState(BaseModel):
    """Everything a running session knows.

    Only the interaction controller mutates this object. The view functions
    read it and never write back.
    """

    catalog: list[MoodEntry] = Field(default_factory=list, description="Built-ins first, then custom")
    selected_id: Optional[int] = Field(default=None, description="Id of the expanded entry")
    history: list[HistoryRecord] = Field(default_factory=list, description="Newest first")
    streak: int = Field(default=1, ge=1, description="Selection counter")
    search_query: str = Field(default="", description="Live filter text")
    draft_note: str = Field(default="", description="Note being typed")
    draft_label: str = Field(default="", description="Add-mood form: label")
    draft_description: str = Field(default="", description="Add-mood form: description")
    draft_tip: str = Field(default="", description="Add-mood form: tip")
    next_id: int = Field(default=1, ge=1, description="Next identifier to hand out")

    def allocate_id(self) -> int:
        """Hand out the next entry identifier."""
        mood_id = self.next_id
        self.next_id += 1
        return mood_id

    def index_of(self, mood_id: Optional[int]) -> Optional[int]:
        """Position of the entry with ``mood_id`` in the catalog, if present."""
        if mood_id is None:
            return None
        for i, entry in enumerate(self.catalog):
            if entry.id == mood_id:
                return i
        return None

    def entry_at(self, index: int) -> Optional[MoodEntry]:
        """Catalog entry at ``index``; negative or out-of-range gives None."""
        if 0 <= index < len(self.catalog):
            return self.catalog[index]
        return None

    @property
    def selected_index(self) -> Optional[int]:
        return self.index_of(self.selected_id)
