"""Order models."""
from typing import Dict, List

from pydantic import BaseModel

from app.services.menu.base import FoodItem

# Group name -> items, captured when the order was placed
OrderSnapshot = Dict[str, List[FoodItem]]


class OrderLine(BaseModel):
    """Items of one name within a group, aggregated."""

    item_name: str
    quantity: int
    line_total: float


class GroupSummary(BaseModel):
    """Priced breakdown of one group in an order."""

    name: str
    lines: List[OrderLine] = []
    subtotal: float = 0.0
    total: float = 0.0


class OrderSummary(BaseModel):
    """Priced breakdown of a placed order."""

    order_id: int
    groups: List[GroupSummary] = []
    total: float = 0.0

    def get_text(self) -> str:
        """Get the order details as display text."""
        lines = [f"Order #{self.order_id} Details"]
        for group in self.groups:
            lines.append(f"Group: {group.name}")
            for line in group.lines:
                lines.append(f"• {line.quantity}x {line.item_name} - ${line.line_total:.2f}")
            lines.append(f"Subtotal: ${group.subtotal:.2f}")
            lines.append(f"Total with Tax: ${group.total:.2f}")
            lines.append("")
        lines.append(f"Order Total: ${self.total:.2f}")
        return "\n".join(lines)
