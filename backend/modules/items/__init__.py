"""
Items module.

Owner-scoped CRUD over shopping list items.

Public API:
- IItemService, IItemRepository: Interfaces
- ItemService: Implementation with ownership checks
- ListItem, CreateItemRequest, UpdateItemRequest: Models
- ItemNotFoundError: Absent or not owned by the caller
"""

from .interfaces import IItemRepository, IItemService
from .models import CreateItemRequest, ListItem, UpdateItemRequest
from .exceptions import ItemNotFoundError
from .service import ItemService

__all__ = [
    "IItemRepository",
    "IItemService",
    "ItemService",
    "ListItem",
    "CreateItemRequest",
    "UpdateItemRequest",
    "ItemNotFoundError",
]
