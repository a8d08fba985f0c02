"""
Items module data models.

A list item belongs to exactly one account (owner_id). Over HTTP the
fields are camelCase: id, ownerId, name, quantity, category, createdAt.
"""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import Field

from shared.models import CamelModel


class ListItem(CamelModel):
    """A shopping list item as stored and returned."""

    id: str = Field(default_factory=lambda: str(uuid4()), description="Item ID (partition key)")
    owner_id: str = Field(..., description="ID of the owning account")
    name: str = Field(..., min_length=1, description="What to buy")
    quantity: int = Field(default=1, gt=0, description="How many")
    category: str = Field(default="", description="Free-form grouping, e.g. Groceries")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class CreateItemRequest(CamelModel):
    """Body of POST /api/items. The owner always comes from the token."""

    name: str = Field(..., min_length=1, description="What to buy")
    quantity: int = Field(default=1, gt=0)
    category: str = Field(default="")


class UpdateItemRequest(CamelModel):
    """Body of PUT /api/items/{id}. Replaces name, quantity and category."""

    name: str = Field(..., min_length=1, description="What to buy")
    quantity: int = Field(default=1, gt=0)
    category: str = Field(default="")
