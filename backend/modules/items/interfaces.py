"""
Items module interfaces.

The API layer depends on IItemService; the service depends on
IItemRepository so the in-memory and Supabase stores are interchangeable.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import CreateItemRequest, ListItem, UpdateItemRequest


@runtime_checkable
class IItemRepository(Protocol):
    """
    Storage contract for list items.

    Note: repositories do NOT perform ownership checks. The service layer
    is responsible for comparing owner_id with the caller.
    """

    def list_by_owner(self, owner_id: str) -> list[ListItem]:
        ...

    def get(self, item_id: str) -> Optional[ListItem]:
        ...

    def create(self, item: ListItem) -> ListItem:
        ...

    def update(self, item: ListItem) -> Optional[ListItem]:
        ...

    def delete(self, item_id: str) -> bool:
        ...


@runtime_checkable
class IItemService(Protocol):
    """
    Interface for owner-scoped item operations.

    Every method takes the caller's account ID from the request gate.
    """

    async def list_items(self, owner_id: str) -> list[ListItem]:
        """Return all items owned by the caller, oldest first."""
        ...

    async def get_item(self, item_id: str, owner_id: str) -> ListItem:
        """
        Get one item.

        Raises:
            ItemNotFoundError: If the item is absent or not the caller's
        """
        ...

    async def add_item(self, owner_id: str, request: CreateItemRequest) -> ListItem:
        """Create an item owned by the caller."""
        ...

    async def update_item(
        self,
        item_id: str,
        owner_id: str,
        request: UpdateItemRequest,
    ) -> ListItem:
        """
        Replace an item's name, quantity and category.

        Raises:
            ItemNotFoundError: If the item is absent or not the caller's
        """
        ...

    async def delete_item(self, item_id: str, owner_id: str) -> None:
        """
        Delete an item.

        Raises:
            ItemNotFoundError: If the item is absent or not the caller's
        """
        ...
