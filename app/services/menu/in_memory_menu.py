"""In-memory menu provider."""
import logging
from pathlib import Path
from typing import List, Optional

import yaml

from app.services.menu.base import FoodItem, MenuProvider

logger = logging.getLogger(__name__)

DEFAULT_ITEMS = [
    {"id": 1, "name": "Pizza", "price": 12.99},
    {"id": 2, "name": "Burger", "price": 8.99},
    {"id": 3, "name": "Sushi", "price": 15.99},
    {"id": 4, "name": "Pasta", "price": 10.99},
    {"id": 5, "name": "Salad", "price": 7.99},
    {"id": 6, "name": "Ice Cream", "price": 4.99},
    {"id": 7, "name": "Sandwich", "price": 6.99},
    {"id": 8, "name": "Taco", "price": 3.99},
]


class InMemoryMenuProvider(MenuProvider):
    """In-memory menu provider using YAML configuration."""

    def __init__(self, menu_file: Optional[str] = None):
        """Initialize with optional menu file path."""
        if menu_file is None:
            menu_file = Path(__file__).parent / "data" / "menu.yaml"
        self.menu_file = Path(menu_file)

    def load_items(self) -> List[FoodItem]:
        """Load menu items from the YAML file, or the built-in seed if it is missing."""
        if not self.menu_file.exists():
            logger.warning(
                f"[MENU] Menu file not found at {self.menu_file}, using default menu"
            )
            raw_items = DEFAULT_ITEMS
        else:
            with open(self.menu_file, "r") as f:
                data = yaml.safe_load(f) or {}
            raw_items = data.get("items", [])

        items = [FoodItem(**item) for item in raw_items]

        seen = set()
        for item in items:
            if item.id in seen:
                raise ValueError(f"Duplicate menu item id {item.id} in {self.menu_file}")
            seen.add(item.id)

        logger.debug(f"[MENU] Loaded {len(items)} items")
        return items
