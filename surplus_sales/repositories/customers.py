# surplus_sales/repositories/customers.py

from surplus_sales.core.exceptions import ConflictError, NotFoundError
from surplus_sales.models.customers import Customer
from surplus_sales.repositories.base import BaseRepository

EDITABLE_FIELDS = ("name", "email", "phone", "address")


class CustomerRepository(BaseRepository):
    model = Customer
    label = "Customer"

    def list(self):
        return (
            self.db.query(Customer)
            .order_by(Customer.created_at.desc())
            .all()
        )

    def get_by_email(self, email: str):
        customer = self.db.query(Customer).filter(Customer.email == email).first()
        if customer is None:
            raise NotFoundError(f"Customer with email {email} not found")
        return customer

    def _ensure_email_free(self, email: str, customer_id: str | None = None):
        query = self.db.query(Customer).filter(Customer.email == email)
        if customer_id is not None:
            query = query.filter(Customer.id != customer_id)
        if query.first():
            raise ConflictError("Customer with this email already exists")

    def create(self, data: dict):
        self._ensure_email_free(data["email"])

        customer = Customer(
            name=data["name"],
            email=data["email"],
            phone=data.get("phone"),
            address=data.get("address"),
        )
        return self._save(customer, "create customer")

    def update(self, customer_id: str, data: dict):
        customer = self.get(customer_id)

        if data.get("email") and data["email"] != customer.email:
            self._ensure_email_free(data["email"], customer_id)

        for field in EDITABLE_FIELDS:
            if data.get(field) is not None:
                setattr(customer, field, data[field])

        return self._save(customer, f"update customer {customer_id}")
