# surplus_sales/routers/accessories.py

from fastapi import APIRouter, Depends, Query, status

from surplus_sales.core.auth import get_current_user
from surplus_sales.core.deps import get_accessory_repository
from surplus_sales.repositories.accessories import AccessoryRepository
from surplus_sales.schemas.inventory import (
    InventoryCreate,
    InventoryUpdate,
    InventoryResponse,
)

router = APIRouter(
    prefix="/accessories",
    tags=["Accessories"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[InventoryResponse])
def list_accessories(
    make: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    unit_color: str | None = Query(None),
    search: str | None = Query(None),
    repo: AccessoryRepository = Depends(get_accessory_repository),
):
    return repo.list(
        {
            "make": make,
            "status": status_filter,
            "unit_color": unit_color,
            "search": search,
        }
    )


@router.get("/{accessory_id}", response_model=InventoryResponse)
def get_accessory(
    accessory_id: int,
    repo: AccessoryRepository = Depends(get_accessory_repository),
):
    return repo.get(accessory_id)


@router.post(
    "",
    response_model=InventoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_accessory(
    accessory_data: InventoryCreate,
    repo: AccessoryRepository = Depends(get_accessory_repository),
):
    return repo.create(accessory_data.model_dump())


@router.put("/{accessory_id}", response_model=InventoryResponse)
def update_accessory(
    accessory_id: int,
    accessory_data: InventoryUpdate,
    repo: AccessoryRepository = Depends(get_accessory_repository),
):
    return repo.update(accessory_id, accessory_data.model_dump(exclude_unset=True))


@router.delete("/{accessory_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_accessory(
    accessory_id: int,
    repo: AccessoryRepository = Depends(get_accessory_repository),
):
    repo.delete(accessory_id)
    return None
