import pytest

from labinventory.models import StockStatus
from labinventory.schemas import InventoryItem
from labinventory.services.inventory import build_row, category_label, low_stock_count, stock_status, summarize


def _item(current_stock, critical_level, **extra) -> InventoryItem:
    return InventoryItem(
        id=extra.pop("id", 1),
        name=extra.pop("name", "Pipette tips"),
        current_stock=current_stock,
        critical_level=critical_level,
        unit="box",
        **extra,
    )


@pytest.mark.parametrize(
    ("current_stock", "critical_level", "expected"),
    [
        (6, 5, StockStatus.IN_STOCK),
        (5, 5, StockStatus.LOW_STOCK),
        (1, 5, StockStatus.LOW_STOCK),
        (0, 5, StockStatus.OUT_OF_STOCK),
        (0, 0, StockStatus.OUT_OF_STOCK),
        (2.5, 2, StockStatus.IN_STOCK),
    ],
)
def test_stock_status_boundaries(current_stock, critical_level, expected) -> None:
    assert stock_status(_item(current_stock, critical_level)) == expected


def test_status_labels_and_badges() -> None:
    assert StockStatus.IN_STOCK.label == "In Stock"
    assert StockStatus.LOW_STOCK.badge == "⚠️ Low Stock"
    assert StockStatus.OUT_OF_STOCK.badge == "❌ Out of Stock"


def test_low_stock_count_includes_out_of_stock() -> None:
    items = [_item(10, 5), _item(5, 5), _item(0, 5), _item(3, 2)]
    assert low_stock_count(items) == 2


def test_summarize() -> None:
    summary = summarize([_item(10, 5), _item(0, 1)])
    assert summary.total_items == 2
    assert summary.connection_status == "Connected"
    assert summary.low_stock_count == 1


def test_category_falls_back_to_uncategorized() -> None:
    assert category_label(_item(1, 1)) == "Uncategorized"
    assert category_label(_item(1, 1, category_name="")) == "Uncategorized"
    assert category_label(_item(1, 1, category_name="Reagents")) == "Reagents"


def test_build_row_keeps_unknown_fields_out() -> None:
    row = build_row(_item(4, 2, category_name="Consumables", supplier="Acme"))
    assert row.category == "Consumables"
    assert row.status == "In Stock"
    assert row.unit == "box"
    assert not hasattr(row, "supplier")
