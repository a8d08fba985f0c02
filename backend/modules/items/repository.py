"""
List item repositories.

Two implementations of IItemRepository:
- InMemoryItemRepository: process-local dict, for tests and development
- SupabaseItemRepository: durable storage in a Supabase table
"""

from typing import Optional

from shared.repository import BaseRepository
from .models import ListItem


class InMemoryItemRepository:
    """Keeps items in a dict keyed by id. Not shared across processes."""

    def __init__(self) -> None:
        self._items: dict[str, ListItem] = {}

    def list_by_owner(self, owner_id: str) -> list[ListItem]:
        items = [i for i in self._items.values() if i.owner_id == owner_id]
        return sorted(items, key=lambda i: i.created_at)

    def get(self, item_id: str) -> Optional[ListItem]:
        return self._items.get(item_id)

    def create(self, item: ListItem) -> ListItem:
        self._items[item.id] = item
        return item

    def update(self, item: ListItem) -> Optional[ListItem]:
        if item.id not in self._items:
            return None
        self._items[item.id] = item
        return item

    def delete(self, item_id: str) -> bool:
        return self._items.pop(item_id, None) is not None


class SupabaseItemRepository(BaseRepository[ListItem]):
    """List items in a Supabase table, one row per item."""

    model = ListItem

    def list_by_owner(self, owner_id: str) -> list[ListItem]:
        result = self._query().select("*").eq("owner_id", owner_id).order("created_at").execute()
        return [self._to_model(row) for row in result.data]

    def get(self, item_id: str) -> Optional[ListItem]:
        return self._first(self._query().select("*").eq("id", item_id).execute())

    def create(self, item: ListItem) -> ListItem:
        return self._first(self._query().insert(self._to_row(item)).execute()) or item

    def update(self, item: ListItem) -> Optional[ListItem]:
        # No row back means the item was gone
        return self._first(self._query().update(self._to_row(item)).eq("id", item.id).execute())

    def delete(self, item_id: str) -> bool:
        result = self._query().delete().eq("id", item_id).execute()
        return bool(result.data)
