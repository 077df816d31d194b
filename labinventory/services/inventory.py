from __future__ import annotations

from collections.abc import Iterable

from labinventory.models import StockStatus
from labinventory.schemas import DashboardSummary, InventoryItem, InventoryRow

UNCATEGORIZED = "Uncategorized"


def stock_status(item: InventoryItem) -> StockStatus:
    if item.current_stock > item.critical_level:
        return StockStatus.IN_STOCK
    if item.current_stock > 0:
        return StockStatus.LOW_STOCK
    return StockStatus.OUT_OF_STOCK


def status_badge(item: InventoryItem) -> str:
    return stock_status(item).badge


def category_label(item: InventoryItem) -> str:
    return item.category_name or UNCATEGORIZED


def is_low_stock(item: InventoryItem) -> bool:
    # Out-of-stock items count as low stock too.
    return item.current_stock <= item.critical_level


def low_stock_count(items: Iterable[InventoryItem]) -> int:
    return sum(1 for item in items if is_low_stock(item))


def summarize(items: list[InventoryItem]) -> DashboardSummary:
    return DashboardSummary(total_items=len(items), low_stock_count=low_stock_count(items))


def build_row(item: InventoryItem) -> InventoryRow:
    status = stock_status(item)
    return InventoryRow(
        id=item.id,
        name=item.name,
        category=category_label(item),
        current_stock=item.current_stock,
        critical_level=item.critical_level,
        unit=item.unit or "",
        status=status.label,
        status_badge=status.badge,
    )
