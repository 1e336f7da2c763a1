"""Favorites API endpoints."""
import logging
from typing import List

from fastapi import APIRouter, Depends

from app.api.menu import FoodItemResponse
from app.core.dependencies import get_data_manager
from app.services.store.data_manager import DataManager


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/api/favorites", response_model=List[FoodItemResponse])
async def get_favorites(data_manager: DataManager = Depends(get_data_manager)):
    """Get favorite menu items."""
    return [
        FoodItemResponse.model_validate(item, from_attributes=True)
        for item in data_manager.get_favorite_items()
    ]


@router.post("/api/favorites/{item_id}/toggle", response_model=FoodItemResponse)
async def toggle_favorite(item_id: int, data_manager: DataManager = Depends(get_data_manager)):
    """Flip the favorite flag of a menu item and return the updated item."""
    data_manager.toggle_favorite(item_id)
    item = data_manager.get_item(item_id)
    logger.info(f"[FAVORITES] Item {item_id} favorite is now {item.is_favorite}")
    return FoodItemResponse.model_validate(item, from_attributes=True)
