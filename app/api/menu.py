"""Menu API endpoints."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from app.core.dependencies import get_data_manager
from app.services.store.data_manager import DataManager


router = APIRouter()
logger = logging.getLogger(__name__)


class FoodItemResponse(BaseModel):
    """Food item response model."""
    id: int
    name: str
    price: float
    description: Optional[str] = None
    category: Optional[str] = None
    is_favorite: bool = False

    class Config:
        from_attributes = True


class MenuResponse(BaseModel):
    """Menu response model."""
    items: List[FoodItemResponse]
    categories: List[str] = []


@router.get("/api/menu", response_model=MenuResponse)
async def get_menu(data_manager: DataManager = Depends(get_data_manager)):
    """Get the full menu."""
    items = data_manager.get_catalog()
    logger.debug(f"[MENU] Menu requested - {len(items)} items")
    return MenuResponse(
        items=[FoodItemResponse.model_validate(item, from_attributes=True) for item in items],
        categories=data_manager.menu_repository.get_categories(),
    )


@router.get("/api/menu/text", response_class=PlainTextResponse)
async def get_menu_text(data_manager: DataManager = Depends(get_data_manager)):
    """Get the menu as display text; favorites are starred."""
    return data_manager.menu_repository.get_menu_text()


@router.get("/api/menu/{item_id}", response_model=FoodItemResponse)
async def get_menu_item(item_id: int, data_manager: DataManager = Depends(get_data_manager)):
    """Get a single menu item."""
    item = data_manager.get_item(item_id)
    if item is None:
        logger.info(f"[MENU] Item {item_id} not found")
        raise HTTPException(status_code=404, detail=f"Food item {item_id} not found")
    return FoodItemResponse.model_validate(item, from_attributes=True)
