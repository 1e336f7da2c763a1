"""Order API endpoints."""
import logging
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from app.core.dependencies import get_data_manager
from app.services.ordering.models import OrderSummary
from app.services.store.data_manager import DataManager


router = APIRouter()
logger = logging.getLogger(__name__)


class PlaceOrderResponse(BaseModel):
    """Place order response model."""
    order_id: int
    placed: bool


@router.post("/api/orders", response_model=PlaceOrderResponse)
async def place_order(data_manager: DataManager = Depends(get_data_manager)):
    """Place an order from every non-empty group except Favorites."""
    order_id = data_manager.place_order()
    placed = data_manager.get_order(order_id) is not None
    logger.info(f"[ORDERS] Place order requested - order_id: {order_id}, placed: {placed}")
    return PlaceOrderResponse(order_id=order_id, placed=placed)


@router.get("/api/orders/history", response_model=List[OrderSummary])
async def get_order_history(data_manager: DataManager = Depends(get_data_manager)):
    """Get all orders, newest first."""
    order_ids = sorted(data_manager.get_order_history(), reverse=True)
    logger.debug(f"[ORDERS HISTORY] Found {len(order_ids)} orders")
    return [data_manager.get_order_summary(order_id) for order_id in order_ids]


@router.get("/api/orders/{order_id}", response_model=OrderSummary)
async def get_order(order_id: int, data_manager: DataManager = Depends(get_data_manager)):
    """Get the priced breakdown of an order."""
    return data_manager.get_order_summary(order_id)


@router.get("/api/orders/{order_id}/details", response_class=PlainTextResponse)
async def get_order_details(order_id: int, data_manager: DataManager = Depends(get_data_manager)):
    """Get the order breakdown as display text."""
    return data_manager.get_order_summary(order_id).get_text()
