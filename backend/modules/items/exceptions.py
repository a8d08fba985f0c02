"""
Items module exceptions.
"""

from shared.exceptions import NotFoundError


class ItemNotFoundError(NotFoundError):
    """
    Raised when an item doesn't exist or belongs to another account.

    The two cases are reported identically.
    """

    def __init__(self, item_id: str):
        super().__init__(
            f"Item with ID {item_id} not found",
            code="ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )
