# surplus_sales/repositories/materials.py

from surplus_sales.core.filters import build_filter_query, exact, search
from surplus_sales.models.materials import Material
from surplus_sales.repositories.base import BaseRepository, normalize_image

MATERIAL_FILTERS = {
    "search": search("name", "category", "supplier", id_column="id"),
    "category": exact("category"),
    "supplier": exact("supplier"),
    "status": exact("status"),
}

EDITABLE_FIELDS = ("name", "category", "supplier", "quantity", "status", "image")


class MaterialRepository(BaseRepository):
    model = Material
    label = "Material"

    def _filtered(self, filters):
        filter_query = build_filter_query(filters or {}, MATERIAL_FILTERS)
        return filter_query.apply(self.db.query(Material))

    def list(self, filters: dict | None = None):
        return (
            self._filtered(filters)
            .order_by(Material.created_at.desc(), Material.id.desc())
            .all()
        )

    def paginate(self, page: int, limit: int, filters: dict | None = None):
        query = self._filtered(filters)
        total = query.count()

        materials = (
            query
            .order_by(Material.created_at.desc(), Material.id.desc())
            .limit(limit)
            .offset((page - 1) * limit)
            .all()
        )

        return materials, total

    def create(self, data: dict):
        material = Material(
            name=data["name"],
            category=data["category"],
            supplier=data["supplier"],
            quantity=data.get("quantity") or 0,
            status=data["status"],
            image=normalize_image(data.get("image")),
        )
        return self._save(material, "create material")

    def update(self, material_id: int, data: dict):
        material = self.get(material_id)

        for field in EDITABLE_FIELDS:
            if data.get(field) is None:
                continue
            if field == "image":
                material.image = normalize_image(data["image"])
            else:
                setattr(material, field, data[field])

        return self._save(material, f"update material {material_id}")
