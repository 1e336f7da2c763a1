"""In-memory state manager for groups, favorites and orders."""
import logging
from typing import Any, Callable, Dict, List, Optional

from app.services.menu.base import FoodItem
from app.services.menu.in_memory_menu import InMemoryMenuProvider
from app.services.menu.repository import MenuRepository
from app.services.notifications.channel import Channel, CurrentValueChannel, Subscription
from app.services.ordering.models import OrderSnapshot, OrderSummary
from app.services.ordering.pricing import (
    TAX_RATE,
    calculate_subtotal,
    calculate_total_with_tax,
    summarize_order,
)
from app.services.store.errors import (
    GroupNotFoundError,
    InvalidGroupNameError,
    InvalidQuantityError,
    ItemNotFoundError,
    OrderNotFoundError,
    ProtectedGroupError,
)

logger = logging.getLogger(__name__)

FAVORITES_GROUP = "Favorites"


def _copy_groups(groups: Dict[str, List[FoodItem]]) -> Dict[str, List[FoodItem]]:
    return {name: [item.model_copy() for item in items] for name, items in groups.items()}


class DataManager:
    """Owns the catalog, the groups and the order history.

    Every mutation updates state first and then publishes the full new
    snapshot on the matching channel before returning. Rejected operations
    raise a ``DataManagerError`` subclass and leave state untouched.

    Not thread-safe: callers sharing an instance must serialise mutations.
    """

    def __init__(
        self,
        menu_repository: Optional[MenuRepository] = None,
        tax_rate: float = TAX_RATE,
    ):
        if menu_repository is None:
            menu_repository = MenuRepository(provider=InMemoryMenuProvider())
        self.menu_repository = menu_repository
        self.tax_rate = tax_rate

        self._groups: Dict[str, List[FoodItem]] = {FAVORITES_GROUP: []}
        self._orders: Dict[int, OrderSnapshot] = {}
        self._next_order_id = 1

        self._channels: Dict[Channel, CurrentValueChannel] = {
            Channel.GROUPS: CurrentValueChannel(Channel.GROUPS.value, _copy_groups(self._groups)),
            Channel.FAVORITES: CurrentValueChannel(Channel.FAVORITES.value, []),
            Channel.ORDERS: CurrentValueChannel(Channel.ORDERS.value, {}),
        }

    # Notifications

    def subscribe(self, channel: Channel, callback: Callable[[Any], None]) -> Subscription:
        """Subscribe to a channel; ``callback`` receives the current snapshot right away."""
        return self._channels[Channel(channel)].subscribe(callback)

    def _publish_groups(self) -> None:
        self._channels[Channel.GROUPS].publish(_copy_groups(self._groups))

    def _publish_favorites(self) -> None:
        self._channels[Channel.FAVORITES].publish(self.menu_repository.get_favorite_items())

    def _publish_orders(self) -> None:
        self._channels[Channel.ORDERS].publish(self.get_order_history())

    # Group store

    def create_empty_group(self, group_name: str) -> None:
        """Create a group with no items."""
        if not group_name:
            raise InvalidGroupNameError("Group name cannot be empty")
        if group_name in self._groups:
            raise InvalidGroupNameError(f"Group '{group_name}' already exists")

        self._groups[group_name] = []
        logger.info(f"[GROUPS] Created group '{group_name}'")
        self._publish_groups()

    def add_to_group(
        self,
        food_item: FoodItem,
        group_name: str = FAVORITES_GROUP,
        quantity: int = 1,
    ) -> None:
        """Append ``quantity`` copies of ``food_item``, creating the group if needed."""
        if not group_name:
            raise InvalidGroupNameError("Group name cannot be empty")
        if quantity < 0:
            raise InvalidQuantityError(f"Quantity must not be negative, got {quantity}")

        group = self._groups.setdefault(group_name, [])
        group.extend(food_item.model_copy() for _ in range(quantity))
        logger.debug(f"[GROUPS] Added {quantity}x {food_item.name} to '{group_name}'")
        self._publish_groups()

    def remove_from_group(self, food_item: FoodItem, group_name: str) -> None:
        """Remove every entry of ``food_item`` from the group.

        A group other than Favorites is deleted once it is empty.
        """
        group = self._groups.get(group_name)
        if group is None:
            raise GroupNotFoundError(f"Group '{group_name}' not found")

        remaining = [item for item in group if item.id != food_item.id]
        if len(remaining) == len(group):
            return

        if group_name != FAVORITES_GROUP and not remaining:
            del self._groups[group_name]
            logger.info(f"[GROUPS] Group '{group_name}' is empty, removed")
        else:
            self._groups[group_name] = remaining
        self._publish_groups()

    def remove_group(self, group_name: str) -> None:
        """Delete a group and its items."""
        if group_name == FAVORITES_GROUP:
            raise ProtectedGroupError(f"'{FAVORITES_GROUP}' cannot be removed")
        if group_name not in self._groups:
            raise GroupNotFoundError(f"Group '{group_name}' not found")

        del self._groups[group_name]
        logger.info(f"[GROUPS] Removed group '{group_name}'")
        self._publish_groups()

    def rename_group(self, old_name: str, new_name: str) -> None:
        """Move a group's items to ``new_name``, keeping their order."""
        if old_name == FAVORITES_GROUP:
            raise ProtectedGroupError(f"'{FAVORITES_GROUP}' cannot be renamed")
        if not new_name:
            raise InvalidGroupNameError("Group name cannot be empty")
        if new_name in self._groups:
            raise InvalidGroupNameError(f"Group '{new_name}' already exists")
        if old_name not in self._groups:
            raise GroupNotFoundError(f"Group '{old_name}' not found")

        self._groups[new_name] = self._groups.pop(old_name)
        logger.info(f"[GROUPS] Renamed group '{old_name}' to '{new_name}'")
        self._publish_groups()

    def get_groups(self) -> List[str]:
        """Get group names in insertion order."""
        return list(self._groups)

    def get_items_in_group(self, group_name: str) -> List[FoodItem]:
        """Get the items of a group, or an empty list if it does not exist."""
        return [item.model_copy() for item in self._groups.get(group_name, [])]

    def calculate_subtotal(self, group_name: str) -> float:
        """Calculate the subtotal for a group (before tax)."""
        return calculate_subtotal(self._groups.get(group_name, []))

    def calculate_total_with_tax(self, group_name: str) -> float:
        """Calculate the total with tax for a group."""
        return calculate_total_with_tax(self.calculate_subtotal(group_name), self.tax_rate)

    # Catalog and favorites

    def get_catalog(self) -> List[FoodItem]:
        """Get all catalog items."""
        return self.menu_repository.get_items()

    def get_item(self, item_id: int) -> Optional[FoodItem]:
        """Get a catalog item by id."""
        return self.menu_repository.get_item(item_id)

    def toggle_favorite(self, food_item_id: int) -> None:
        """Flip the favorite flag of a catalog item."""
        if not self.menu_repository.toggle_favorite(food_item_id):
            raise ItemNotFoundError(f"Food item {food_item_id} not found")

        logger.debug(f"[FAVORITES] Toggled favorite for item {food_item_id}")
        self._publish_favorites()

    def get_favorite_items(self) -> List[FoodItem]:
        """Get favorite catalog items in catalog order."""
        return self.menu_repository.get_favorite_items()

    # Order store

    def place_order(self) -> int:
        """Move every non-empty group except Favorites into a new order.

        Returns the order id. When there is nothing to order, state is left
        unchanged and the id that the next real order will get is returned.
        """
        order_id = self._next_order_id
        snapshot: OrderSnapshot = {
            name: list(items)
            for name, items in self._groups.items()
            if name != FAVORITES_GROUP and items
        }

        if not snapshot:
            logger.info(f"[ORDERS] Nothing to order, order id {order_id} not used")
            return order_id

        self._orders[order_id] = snapshot
        self._next_order_id += 1
        logger.info(
            f"[ORDERS] Placed order {order_id} - {len(snapshot)} groups, "
            f"{sum(len(items) for items in snapshot.values())} items"
        )
        self._publish_orders()

        self._groups = {FAVORITES_GROUP: self._groups.get(FAVORITES_GROUP, [])}
        self._publish_groups()
        return order_id

    def get_order_history(self) -> Dict[int, OrderSnapshot]:
        """Get all placed orders keyed by order id."""
        return {order_id: _copy_groups(snapshot) for order_id, snapshot in self._orders.items()}

    def get_order(self, order_id: int) -> Optional[OrderSnapshot]:
        """Get the snapshot of an order, or None if it does not exist."""
        snapshot = self._orders.get(order_id)
        if snapshot is None:
            return None
        return _copy_groups(snapshot)

    def get_order_summary(self, order_id: int) -> OrderSummary:
        """Get the priced breakdown of an order."""
        snapshot = self._orders.get(order_id)
        if snapshot is None:
            raise OrderNotFoundError(f"Order {order_id} not found")
        return summarize_order(order_id, snapshot, self.tax_rate)
