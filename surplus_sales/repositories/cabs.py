# surplus_sales/repositories/cabs.py

from surplus_sales.models.cabs import MultiCab
from surplus_sales.repositories.inventory import InventoryRepository


class CabRepository(InventoryRepository):
    model = MultiCab
    label = "Cab"
