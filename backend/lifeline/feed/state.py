"""Filter state: the mutable view state that drives feed projection."""

from pydantic import BaseModel, Field


class FilterState(BaseModel):
    """Free-text query plus the set of selected category ids.

    Every change is a direct assignment or toggle; there are no pending
    states and nothing here can fail.
    """

    query: str = ""
    selected_category_ids: set[str] = Field(default_factory=set)

    def set_query(self, query: str) -> None:
        self.query = query

    def toggle_category(self, category_id: str) -> bool:
        """Flip membership of ``category_id``. Returns True if now selected."""
        if category_id in self.selected_category_ids:
            self.selected_category_ids.discard(category_id)
            return False
        self.selected_category_ids.add(category_id)
        return True

    def clear(self) -> None:
        self.query = ""
        self.selected_category_ids.clear()

    @property
    def has_query(self) -> bool:
        return bool(self.query.strip())

    @property
    def is_active(self) -> bool:
        return self.has_query or bool(self.selected_category_ids)
