"""FastAPI dependencies."""
from fastapi import Request

from app.core.config import settings
from app.services.menu.repository import MenuRepository
from app.services.menu.in_memory_menu import InMemoryMenuProvider
from app.services.store.data_manager import DataManager


def build_data_manager() -> DataManager:
    """Create a data manager from application settings."""
    provider = InMemoryMenuProvider(menu_file=settings.menu_file)
    return DataManager(
        menu_repository=MenuRepository(provider=provider),
        tax_rate=settings.tax_rate,
    )


def get_data_manager(request: Request) -> DataManager:
    """Get the data manager owned by the running application."""
    data_manager = getattr(request.app.state, "data_manager", None)
    if data_manager is None:
        data_manager = build_data_manager()
        request.app.state.data_manager = data_manager
    return data_manager
