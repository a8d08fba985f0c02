"""
Shopping list item API endpoints.

Every route runs the full request gate and scopes data access to the
caller's account ID.
"""

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_item_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IItemService
from .models import CreateItemRequest, ListItem, UpdateItemRequest

router = APIRouter()


@router.get("", response_model=list[ListItem])
async def list_items(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IItemService = Depends(get_item_service),
) -> list[ListItem]:
    """
    List the current user's items, oldest first.
    """
    return await service.list_items(user.id)


@router.post("", response_model=ListItem, status_code=201)
async def add_item(
    request: CreateItemRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IItemService = Depends(get_item_service),
) -> ListItem:
    """
    Add an item to the current user's list.
    """
    return await service.add_item(user.id, request)


@router.get("/{item_id}", response_model=ListItem)
async def get_item(
    item_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IItemService = Depends(get_item_service),
) -> ListItem:
    """
    Get one of the current user's items.
    """
    return await service.get_item(item_id, user.id)


@router.put("/{item_id}", response_model=ListItem)
async def update_item(
    item_id: str,
    request: UpdateItemRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IItemService = Depends(get_item_service),
) -> ListItem:
    """
    Replace an item's name, quantity and category.
    """
    return await service.update_item(item_id, user.id, request)


@router.delete("/{item_id}", status_code=204)
async def delete_item(
    item_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IItemService = Depends(get_item_service),
) -> Response:
    """
    Delete one of the current user's items.
    """
    await service.delete_item(item_id, user.id)
    return Response(status_code=204)
