"""Health check endpoint."""
import logging
from fastapi import APIRouter, Depends, Request

from app.core.dependencies import get_data_manager
from app.services.store.data_manager import DataManager

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(request: Request, data_manager: DataManager = Depends(get_data_manager)):
    """Health check endpoint with current store sizes."""
    logger.debug(
        f"[HEALTH] Health check requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    return {
        "status": "healthy",
        "groups": len(data_manager.get_groups()),
        "orders": len(data_manager.get_order_history()),
    }
