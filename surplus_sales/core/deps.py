# surplus_sales/core/deps.py
#
# Request-scoped repositories, one per resource.

from fastapi import Depends
from sqlalchemy.orm import Session

from surplus_sales.database import get_db
from surplus_sales.repositories.accessories import AccessoryRepository
from surplus_sales.repositories.activity_logs import ActivityLogRepository
from surplus_sales.repositories.cabs import CabRepository
from surplus_sales.repositories.customers import CustomerRepository
from surplus_sales.repositories.materials import MaterialRepository
from surplus_sales.repositories.sales import SaleRepository
from surplus_sales.repositories.users import UserRepository


def get_cab_repository(db: Session = Depends(get_db)) -> CabRepository:
    return CabRepository(db)


def get_accessory_repository(db: Session = Depends(get_db)) -> AccessoryRepository:
    return AccessoryRepository(db)


def get_material_repository(db: Session = Depends(get_db)) -> MaterialRepository:
    return MaterialRepository(db)


def get_customer_repository(db: Session = Depends(get_db)) -> CustomerRepository:
    return CustomerRepository(db)


def get_sale_repository(db: Session = Depends(get_db)) -> SaleRepository:
    return SaleRepository(db)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_activity_log_repository(db: Session = Depends(get_db)) -> ActivityLogRepository:
    return ActivityLogRepository(db)
