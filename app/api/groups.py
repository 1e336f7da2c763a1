"""Group API endpoints."""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from app.api.menu import FoodItemResponse
from app.core.dependencies import get_data_manager
from app.services.store.data_manager import DataManager
from app.services.store.errors import ItemNotFoundError


router = APIRouter()
logger = logging.getLogger(__name__)


class GroupResponse(BaseModel):
    """Group response model."""
    name: str
    items: List[FoodItemResponse] = []
    subtotal: float = 0.0
    total: float = 0.0


class CreateGroupRequest(BaseModel):
    """Create group request."""
    name: str


class RenameGroupRequest(BaseModel):
    """Rename group request."""
    new_name: str


class AddItemRequest(BaseModel):
    """Add item to group request."""
    item_id: int
    quantity: int = Field(default=1, ge=0)


def _group_response(data_manager: DataManager, name: str) -> GroupResponse:
    return GroupResponse(
        name=name,
        items=[
            FoodItemResponse.model_validate(item, from_attributes=True)
            for item in data_manager.get_items_in_group(name)
        ],
        subtotal=data_manager.calculate_subtotal(name),
        total=data_manager.calculate_total_with_tax(name),
    )


def _all_groups(data_manager: DataManager) -> List[GroupResponse]:
    return [_group_response(data_manager, name) for name in data_manager.get_groups()]


@router.get("/api/groups", response_model=List[GroupResponse])
async def list_groups(data_manager: DataManager = Depends(get_data_manager)):
    """Get all groups with their items and totals."""
    return _all_groups(data_manager)


@router.post("/api/groups", response_model=GroupResponse)
async def create_group(
    request: CreateGroupRequest,
    data_manager: DataManager = Depends(get_data_manager),
):
    """Create an empty group."""
    data_manager.create_empty_group(request.name)
    return _group_response(data_manager, request.name)


@router.get("/api/groups/{name}", response_model=GroupResponse)
async def get_group(name: str, data_manager: DataManager = Depends(get_data_manager)):
    """Get a group with its items and totals."""
    if name not in data_manager.get_groups():
        raise HTTPException(status_code=404, detail=f"Group '{name}' not found")
    return _group_response(data_manager, name)


@router.post("/api/groups/{name}/items", response_model=GroupResponse)
async def add_item_to_group(
    name: str,
    request: AddItemRequest,
    data_manager: DataManager = Depends(get_data_manager),
):
    """Add a menu item to a group, creating the group if needed."""
    item = data_manager.get_item(request.item_id)
    if item is None:
        raise ItemNotFoundError(f"Food item {request.item_id} not found")

    data_manager.add_to_group(item, group_name=name, quantity=request.quantity)
    logger.info(f"[GROUPS] Added {request.quantity}x {item.name} to '{name}'")
    return _group_response(data_manager, name)


@router.delete("/api/groups/{name}/items/{item_id}", response_model=List[GroupResponse])
async def remove_item_from_group(
    name: str,
    item_id: int,
    data_manager: DataManager = Depends(get_data_manager),
):
    """Remove every entry of a menu item from a group."""
    item = data_manager.get_item(item_id)
    if item is None:
        raise ItemNotFoundError(f"Food item {item_id} not found")

    data_manager.remove_from_group(item, name)
    return _all_groups(data_manager)


@router.patch("/api/groups/{name}", response_model=GroupResponse)
async def rename_group(
    name: str,
    request: RenameGroupRequest,
    data_manager: DataManager = Depends(get_data_manager),
):
    """Rename a group."""
    data_manager.rename_group(name, request.new_name)
    return _group_response(data_manager, request.new_name)


@router.delete("/api/groups/{name}", response_model=List[GroupResponse])
async def delete_group(name: str, data_manager: DataManager = Depends(get_data_manager)):
    """Delete a group."""
    data_manager.remove_group(name)
    return _all_groups(data_manager)
