"""
Base class for the Supabase-backed repositories.

Rows are the model's fields in snake_case, JSON-encoded (datetimes as
ISO strings, enums as their values).
"""

from typing import Any, ClassVar, Generic, Optional, TypeVar

from pydantic import BaseModel
from supabase import Client

M = TypeVar("M", bound=BaseModel)


class BaseRepository(Generic[M]):
    """
    Table access plus model/row mapping.

    Subclasses set `model` and implement the queries their interface
    needs on top of `_query()`.
    """

    model: ClassVar[type[BaseModel]]

    def __init__(self, db: Client, table: str) -> None:
        self._db = db
        self._table = table

    def _query(self):
        return self._db.table(self._table)

    def _to_row(self, obj: M) -> dict[str, Any]:
        return obj.model_dump(mode="json")

    def _to_model(self, row: dict[str, Any]) -> M:
        return self.model.model_validate(row)

    def _first(self, result: Any) -> Optional[M]:
        """First row of a query result as a model, or None when empty."""
        if not result.data:
            return None
        return self._to_model(result.data[0])
