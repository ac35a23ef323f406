# surplus_sales/repositories/accessories.py

from surplus_sales.models.accessories import Accessory
from surplus_sales.repositories.inventory import InventoryRepository


class AccessoryRepository(InventoryRepository):
    model = Accessory
    label = "Accessory"

    # Accessories are listed in catalogue order
    newest_first = False
