# =========================================================
# SALES REPOSITORY
#
# Sale headers, sale items and the cab sale workflow.
#
# A cab sale is one transaction: the sale row, its items and the
# inventory decrements are committed together or not at all.
# =========================================================

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from sqlalchemy import func, update
from sqlalchemy.exc import SQLAlchemyError

from surplus_sales.core.exceptions import InternalError, NotFoundError, ValidationError
from surplus_sales.core.filters import build_filter_query, equals, gte, lte
from surplus_sales.core.stock import status_case
from surplus_sales.models.accessories import Accessory
from surplus_sales.models.cabs import MultiCab
from surplus_sales.models.sale_items import ITEM_TYPE_ACCESSORY, ITEM_TYPE_CAB, SaleItem
from surplus_sales.models.sales import Sale
from surplus_sales.repositories.base import BaseRepository

logger = logging.getLogger("surplus_sales")

SALE_FILTERS = {
    "customer_id": equals("customer_id"),
    "sold_by": equals("sold_by"),
    "date_from": gte("sale_date"),
    "date_to": lte("sale_date"),
}

EDITABLE_FIELDS = ("customer_id", "sold_by", "sale_date")


@dataclass
class AccessoryForSale:
    id: int
    quantity: int


@dataclass
class SoldAccessory:
    id: int
    name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


@dataclass
class CabSale:
    sale: Sale
    cab_id: int
    customer_id: str
    quantity: int
    total_price: Decimal
    sale_date: date
    accessories: list = field(default_factory=list)


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def validate_cab_sale(customer_id, quantity, accessories) -> None:
    """Reject a sale request before it reaches the database."""
    if not customer_id or not str(customer_id).strip():
        raise ValidationError("Customer ID is required")

    if quantity is None or quantity <= 0:
        raise ValidationError("Quantity must be greater than zero")

    for line in accessories:
        if line.quantity is None or line.quantity <= 0:
            raise ValidationError(
                f"Quantity for accessory {line.id} must be greater than zero"
            )


def decrement_stock_statement(model, record_id: int, quantity: int):
    """UPDATE that takes quantity off a cab or accessory row and re-derives status.

    status is assigned before quantity: MySQL applies SET assignments left to
    right, so the CASE must still see the old quantity.
    No floor at zero: stock is not checked before selling.
    """
    remaining = model.quantity - quantity

    return (
        update(model)
        .where(model.id == record_id)
        .ordered_values(
            (model.status, status_case(remaining)),
            (model.quantity, remaining),
            (model.updated_at, func.now()),
        )
    )


class SaleRepository(BaseRepository):
    model = Sale
    label = "Sale"

    # ===============================
    # READS
    # ===============================
    def list(self, filters: dict | None = None):
        filters = {
            name: value.isoformat() if isinstance(value, date) else value
            for name, value in (filters or {}).items()
        }
        filter_query = build_filter_query(filters, SALE_FILTERS)

        return (
            filter_query.apply(self.db.query(Sale))
            .order_by(Sale.created_at.desc())
            .all()
        )

    def list_for_customer(self, customer_id: str):
        return self.list({"customer_id": customer_id})

    def items(self, sale_id: str):
        self.get(sale_id)

        return (
            self.db.query(SaleItem)
            .filter(SaleItem.sale_id == sale_id)
            .order_by(SaleItem.created_at.asc(), SaleItem.item_type.desc())
            .all()
        )

    # ===============================
    # HEADER MAINTENANCE
    # ===============================
    def update(self, sale_id: str, data: dict):
        sale = self.get(sale_id)

        # total_price is derived from the items and never edited here
        for field_name in EDITABLE_FIELDS:
            if data.get(field_name) is not None:
                setattr(sale, field_name, data[field_name])

        return self._save(sale, f"update sale {sale_id}")

    # Deleting a sale removes its items through the relationship cascade

    # ===============================
    # CAB SALE WORKFLOW
    # ===============================
    def sell_cab(
        self,
        cab_id: int,
        customer_id: str,
        quantity: int,
        sold_by: str,
        accessories=(),
    ) -> CabSale:
        accessories = list(accessories)
        validate_cab_sale(customer_id, quantity, accessories)

        try:
            cab = self.db.get(MultiCab, cab_id)
            if cab is None:
                raise NotFoundError(f"Cab with ID {cab_id} not found")

            cab_price = _to_decimal(cab.price)
            cab_subtotal = cab_price * quantity

            sold_accessories = []
            for line in accessories:
                accessory = self.db.get(Accessory, line.id)
                if accessory is None:
                    # A missing accessory drops its line; the sale goes ahead
                    logger.warning(
                        f"Accessory {line.id} not found, skipping it in sale of cab {cab_id}"
                    )
                    continue

                unit_price = _to_decimal(accessory.price)
                sold_accessories.append(
                    SoldAccessory(
                        id=accessory.id,
                        name=accessory.name,
                        quantity=line.quantity,
                        unit_price=unit_price,
                        subtotal=unit_price * line.quantity,
                    )
                )

            total_price = cab_subtotal + sum(
                (sold.subtotal for sold in sold_accessories), Decimal("0")
            )

            sale = Sale(
                customer_id=customer_id,
                sold_by=sold_by,
                sale_date=date.today(),
                total_price=total_price,
            )
            self.db.add(sale)
            self.db.flush()

            self.db.add(
                SaleItem(
                    sale_id=sale.id,
                    item_type=ITEM_TYPE_CAB,
                    multi_cab_id=cab.id,
                    quantity=quantity,
                    unit_price=cab_price,
                    subtotal=cab_subtotal,
                )
            )
            for sold in sold_accessories:
                self.db.add(
                    SaleItem(
                        sale_id=sale.id,
                        item_type=ITEM_TYPE_ACCESSORY,
                        accessory_id=sold.id,
                        quantity=sold.quantity,
                        unit_price=sold.unit_price,
                        subtotal=sold.subtotal,
                    )
                )
            self.db.flush()

            self._decrement_stock(MultiCab, cab.id, quantity)
            for sold in sold_accessories:
                self._decrement_stock(Accessory, sold.id, sold.quantity)

            self.db.commit()

        except NotFoundError:
            self.db.rollback()
            raise

        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Error processing sale of cab {cab_id}: {exc}")
            raise InternalError("Failed to process sale") from exc

        self.db.refresh(sale)

        logger.info(
            f"Sale {sale.id}: cab {cab_id} x{quantity} with "
            f"{len(sold_accessories)} accessories, total {total_price}"
        )

        return CabSale(
            sale=sale,
            cab_id=cab_id,
            customer_id=customer_id,
            quantity=quantity,
            total_price=total_price,
            sale_date=sale.sale_date,
            accessories=sold_accessories,
        )

    def _decrement_stock(self, model, record_id: int, quantity: int) -> None:
        self.db.execute(
            decrement_stock_statement(model, record_id, quantity)
            .execution_options(synchronize_session="fetch")
        )
