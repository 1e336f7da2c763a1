"""Menu repository."""
from typing import List, Optional

from app.services.menu.base import FoodItem, MenuProvider


class MenuRepository:
    """Session catalog loaded once from a provider.

    Names and prices are fixed after loading; only the favorite flag of an
    entry can change.
    """

    def __init__(self, provider: MenuProvider):
        self.provider = provider
        self._items: List[FoodItem] = provider.load_items()

    def get_items(self) -> List[FoodItem]:
        """Get copies of all catalog items in catalog order."""
        return [item.model_copy() for item in self._items]

    def get_item(self, item_id: int) -> Optional[FoodItem]:
        """Get a copy of the item with ``item_id``."""
        for item in self._items:
            if item.id == item_id:
                return item.model_copy()
        return None

    def toggle_favorite(self, item_id: int) -> bool:
        """Flip the favorite flag. Returns False if the id is unknown."""
        for item in self._items:
            if item.id == item_id:
                item.is_favorite = not item.is_favorite
                return True
        return False

    def get_favorite_items(self) -> List[FoodItem]:
        """Get favorite items in catalog order."""
        return [item.model_copy() for item in self._items if item.is_favorite]

    def get_categories(self) -> List[str]:
        """Get unique categories in first-seen order."""
        categories: List[str] = []
        for item in self._items:
            if item.category and item.category not in categories:
                categories.append(item.category)
        return categories

    def get_menu_text(self) -> str:
        """Get menu as formatted text."""
        lines = ["Menu:"]
        for item in self._items:
            star = " *" if item.is_favorite else ""
            desc_str = f" - {item.description}" if item.description else ""
            lines.append(f"  {item.id}. {item.name} ${item.price:.2f}{desc_str}{star}")
        return "\n".join(lines)
