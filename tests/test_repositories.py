import pytest

from surplus_sales.core.exceptions import ConflictError, NotFoundError
from surplus_sales.core.hashing import verify_password
from surplus_sales.repositories.cabs import CabRepository
from surplus_sales.repositories.customers import CustomerRepository
from surplus_sales.repositories.users import UserRepository
from surplus_sales.core.config import settings


def test_user_lookup_and_authentication(db, staff_user):
    repo = UserRepository(db)

    assert repo.email_exists("staff@example.com")
    assert not repo.email_exists("ghost@example.com")
    assert repo.get_by_email("staff@example.com").id == staff_user.id
    assert verify_password("s3cure-staff-pass", staff_user.password_hash)

    assert repo.authenticate("staff@example.com", "s3cure-staff-pass").id == staff_user.id
    assert repo.authenticate("staff@example.com", "wrong") is None
    assert repo.authenticate("ghost@example.com", "anything") is None

    with pytest.raises(NotFoundError):
        repo.get_by_email("ghost@example.com")


def test_user_email_change_conflicts(db, staff_user, admin_user):
    with pytest.raises(ConflictError):
        UserRepository(db).update(staff_user.id, {"email": admin_user.email})


def test_customer_lookup(db):
    repo = CustomerRepository(db)
    customer = repo.create({"name": "Ana Reyes", "email": "ana@example.com"})

    assert repo.get_by_email("ana@example.com").id == customer.id

    with pytest.raises(ConflictError):
        repo.create({"name": "Ana Two", "email": "ana@example.com"})

    with pytest.raises(NotFoundError):
        repo.get("missing-id")


def test_default_image_is_not_stored(db):
    repo = CabRepository(db)

    for image in ("", "null", settings.DEFAULT_IMAGE_URL, None):
        cab = repo.create(
            {"name": "Carry", "make": "Suzuki", "quantity": 1, "price": 5, "unit_color": "Red", "image": image}
        )
        assert cab.image is None

    kept = repo.create(
        {"name": "Carry", "make": "Suzuki", "quantity": 1, "price": 5, "unit_color": "Red", "image": "https://img/cab.png"}
    )
    assert kept.image == "https://img/cab.png"
    assert kept.status == "Low Stock"
