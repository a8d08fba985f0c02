"""
Items service implementation.

Owner-scoped CRUD over list items. Ownership is checked here, after
loading by id, because the repositories don't filter by owner.
"""

import logging

from .exceptions import ItemNotFoundError
from .interfaces import IItemRepository, IItemService
from .models import CreateItemRequest, ListItem, UpdateItemRequest

logger = logging.getLogger(__name__)


class ItemService(IItemService):
    """Implements IItemService over any IItemRepository."""

    def __init__(self, repository: IItemRepository):
        self._repository = repository

    async def list_items(self, owner_id: str) -> list[ListItem]:
        items = self._repository.list_by_owner(owner_id)
        logger.info("Retrieved %d items for user %s", len(items), owner_id)
        return items

    async def get_item(self, item_id: str, owner_id: str) -> ListItem:
        return self._get_owned(item_id, owner_id)

    async def add_item(self, owner_id: str, request: CreateItemRequest) -> ListItem:
        item = ListItem(
            owner_id=owner_id,
            name=request.name,
            quantity=request.quantity,
            category=request.category,
        )
        item = self._repository.create(item)
        logger.info("Added item %s for user %s", item.id, owner_id)
        return item

    async def update_item(
        self,
        item_id: str,
        owner_id: str,
        request: UpdateItemRequest,
    ) -> ListItem:
        existing = self._get_owned(item_id, owner_id)
        updated = existing.model_copy(
            update={
                "name": request.name,
                "quantity": request.quantity,
                "category": request.category,
            }
        )
        saved = self._repository.update(updated)
        if saved is None:
            # Deleted between the read and the write
            raise ItemNotFoundError(item_id)
        logger.info("Updated item %s for user %s", item_id, owner_id)
        return saved

    async def delete_item(self, item_id: str, owner_id: str) -> None:
        self._get_owned(item_id, owner_id)
        if not self._repository.delete(item_id):
            raise ItemNotFoundError(item_id)
        logger.info("Deleted item %s for user %s", item_id, owner_id)

    def _get_owned(self, item_id: str, owner_id: str) -> ListItem:
        item = self._repository.get(item_id)
        if item is None or item.owner_id != owner_id:
            logger.warning("Item %s not found for user %s", item_id, owner_id)
            raise ItemNotFoundError(item_id)
        return item
