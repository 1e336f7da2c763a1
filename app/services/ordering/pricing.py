"""Group and order pricing."""
from typing import Dict, List

from app.services.menu.base import FoodItem
from app.services.ordering.models import GroupSummary, OrderLine, OrderSnapshot, OrderSummary

TAX_RATE = 0.13  # 13%, applied to each group separately


def calculate_subtotal(items: List[FoodItem]) -> float:
    """Sum of prices over every entry, duplicates included."""
    return sum((item.price for item in items), 0.0)


def calculate_total_with_tax(subtotal: float, tax_rate: float = TAX_RATE) -> float:
    """Apply tax to a subtotal."""
    return subtotal * (1 + tax_rate)


def summarize_group(name: str, items: List[FoodItem], tax_rate: float = TAX_RATE) -> GroupSummary:
    """Aggregate a group's entries by item name and price them."""
    counts: Dict[str, int] = {}
    unit_prices: Dict[str, float] = {}
    for item in items:
        counts[item.name] = counts.get(item.name, 0) + 1
        unit_prices.setdefault(item.name, item.price)

    lines = [
        OrderLine(
            item_name=item_name,
            quantity=counts[item_name],
            line_total=unit_prices[item_name] * counts[item_name],
        )
        for item_name in sorted(counts)
    ]
    subtotal = calculate_subtotal(items)
    return GroupSummary(
        name=name,
        lines=lines,
        subtotal=subtotal,
        total=calculate_total_with_tax(subtotal, tax_rate),
    )


def summarize_order(order_id: int, snapshot: OrderSnapshot, tax_rate: float = TAX_RATE) -> OrderSummary:
    """Price every group of an order; groups are listed alphabetically."""
    groups = [summarize_group(name, snapshot[name], tax_rate) for name in sorted(snapshot)]
    return OrderSummary(
        order_id=order_id,
        groups=groups,
        total=sum((group.total for group in groups), 0.0),
    )
