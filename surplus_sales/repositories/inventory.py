# surplus_sales/repositories/inventory.py
#
# Cabs and accessories share one table shape and one set of rules.

from surplus_sales.core.filters import build_filter_query, exact, search
from surplus_sales.core.stock import derive_status
from surplus_sales.repositories.base import BaseRepository, normalize_image

INVENTORY_FILTERS = {
    "make": exact("make"),
    "unit_color": exact("unit_color"),
    "status": exact("status"),
    "search": search("name", "make"),
}

EDITABLE_FIELDS = ("name", "make", "quantity", "price", "unit_color", "image")


class InventoryRepository(BaseRepository):
    newest_first = True

    def list(self, filters: dict | None = None):
        filter_query = build_filter_query(filters or {}, INVENTORY_FILTERS)
        query = filter_query.apply(self.db.query(self.model))

        if self.newest_first:
            query = query.order_by(self.model.created_at.desc(), self.model.id.desc())
        else:
            query = query.order_by(self.model.id.asc())

        return query.all()

    def create(self, data: dict):
        quantity = data.get("quantity") or 0

        record = self.model(
            name=data["name"],
            make=data["make"],
            quantity=quantity,
            price=data.get("price") or 0,
            status=derive_status(quantity).value,
            unit_color=data["unit_color"],
            image=normalize_image(data.get("image")),
        )

        return self._save(record, f"create {self.label.lower()}")

    def update(self, record_id: int, data: dict):
        record = self.get(record_id)

        for field in EDITABLE_FIELDS:
            if field not in data or data[field] is None:
                continue
            if field == "image":
                record.image = normalize_image(data["image"])
            else:
                setattr(record, field, data[field])

        if data.get("quantity") is not None:
            record.status = derive_status(record.quantity).value

        return self._save(record, f"update {self.label.lower()} {record_id}")
