"""Menu provider interface."""
from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel, Field


class FoodItem(BaseModel):
    """Catalog entry. Identity is by ``id``; only ``is_favorite`` changes."""

    id: int
    name: str
    price: float = Field(ge=0)
    description: Optional[str] = None
    category: Optional[str] = None
    is_favorite: bool = False


class MenuProvider(ABC):
    """Abstract base class for menu providers."""

    @abstractmethod
    def load_items(self) -> List[FoodItem]:
        """Load the catalog items in display order."""
        pass
