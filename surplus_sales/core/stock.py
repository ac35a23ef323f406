# surplus_sales/core/stock.py
#
# Stock status is never set by callers: it is derived from quantity
# whenever quantity is written.

import enum

from sqlalchemy import case


class StockStatus(str, enum.Enum):
    OUT_OF_STOCK = "Out of Stock"
    LOW_STOCK = "Low Stock"
    IN_STOCK = "In Stock"
    AVAILABLE = "Available"


# Upper bound (inclusive) of each band, lowest first
LOW_STOCK_MAX = 2
IN_STOCK_MAX = 5


def derive_status(quantity: int) -> StockStatus:
    if quantity <= 0:
        return StockStatus.OUT_OF_STOCK
    if quantity <= LOW_STOCK_MAX:
        return StockStatus.LOW_STOCK
    if quantity <= IN_STOCK_MAX:
        return StockStatus.IN_STOCK
    return StockStatus.AVAILABLE


def status_case(quantity_expr):
    """SQL counterpart of derive_status, for in-database quantity updates."""
    return case(
        (quantity_expr <= 0, StockStatus.OUT_OF_STOCK.value),
        (quantity_expr <= LOW_STOCK_MAX, StockStatus.LOW_STOCK.value),
        (quantity_expr <= IN_STOCK_MAX, StockStatus.IN_STOCK.value),
        else_=StockStatus.AVAILABLE.value,
    )
