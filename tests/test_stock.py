import pytest
from sqlalchemy import literal, select

from surplus_sales.core.stock import StockStatus, derive_status, status_case


@pytest.mark.parametrize(
    "quantity, expected",
    [
        (-3, StockStatus.OUT_OF_STOCK),
        (0, StockStatus.OUT_OF_STOCK),
        (1, StockStatus.LOW_STOCK),
        (2, StockStatus.LOW_STOCK),
        (3, StockStatus.IN_STOCK),
        (5, StockStatus.IN_STOCK),
        (6, StockStatus.AVAILABLE),
        (250, StockStatus.AVAILABLE),
    ],
)
def test_derive_status_bands(quantity, expected):
    assert derive_status(quantity) == expected


def test_status_labels():
    assert derive_status(0).value == "Out of Stock"
    assert derive_status(2).value == "Low Stock"
    assert derive_status(4).value == "In Stock"
    assert derive_status(9).value == "Available"


@pytest.mark.parametrize("quantity", [-1, 0, 1, 2, 3, 5, 6, 40])
def test_sql_case_agrees_with_python(db, quantity):
    result = db.execute(select(status_case(literal(quantity)))).scalar_one()
    assert result == derive_status(quantity).value
