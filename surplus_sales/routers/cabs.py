# =========================================================
# CABS ROUTER
#
# Cab inventory plus the cab sale workflow.
# Status is derived from quantity and never accepted from the client.
# =========================================================

from fastapi import APIRouter, Depends, Query, Request, status

from surplus_sales.core.auth import get_current_user
from surplus_sales.core.deps import get_cab_repository, get_sale_repository
from surplus_sales.core.rate_limiter import limiter
from surplus_sales.repositories.cabs import CabRepository
from surplus_sales.repositories.sales import (
    AccessoryForSale,
    SaleRepository,
    validate_cab_sale,
)
from surplus_sales.schemas.inventory import (
    InventoryCreate,
    InventoryUpdate,
    InventoryResponse,
)
from surplus_sales.schemas.sale import CabSaleRequest, CabSaleResponse

router = APIRouter(
    prefix="/cabs",
    tags=["Cabs"],
    dependencies=[Depends(get_current_user)],
)


# ===============================
# LIST / READ
# ===============================
@router.get("", response_model=list[InventoryResponse])
def list_cabs(
    make: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    unit_color: str | None = Query(None),
    search: str | None = Query(None),
    repo: CabRepository = Depends(get_cab_repository),
):
    return repo.list(
        {
            "make": make,
            "status": status_filter,
            "unit_color": unit_color,
            "search": search,
        }
    )


@router.get("/{cab_id}", response_model=InventoryResponse)
def get_cab(cab_id: int, repo: CabRepository = Depends(get_cab_repository)):
    return repo.get(cab_id)


# ===============================
# WRITE
# ===============================
@router.post(
    "",
    response_model=InventoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_cab(
    cab_data: InventoryCreate,
    repo: CabRepository = Depends(get_cab_repository),
):
    return repo.create(cab_data.model_dump())


@router.put("/{cab_id}", response_model=InventoryResponse)
def update_cab(
    cab_id: int,
    cab_data: InventoryUpdate,
    repo: CabRepository = Depends(get_cab_repository),
):
    return repo.update(cab_id, cab_data.model_dump(exclude_unset=True))


@router.delete("/{cab_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cab(cab_id: int, repo: CabRepository = Depends(get_cab_repository)):
    repo.delete(cab_id)
    return None


# ===============================
# SELL
# ===============================
@router.post(
    "/{cab_id}/sell",
    response_model=CabSaleResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit("30/minute")
def sell_cab(
    request: Request,
    cab_id: int,
    sale_data: CabSaleRequest,
    repo: SaleRepository = Depends(get_sale_repository),
    current_user=Depends(get_current_user),
):
    accessories = [
        AccessoryForSale(id=line.id, quantity=line.quantity)
        for line in sale_data.accessories
    ]

    # Bad input never reaches the repository
    validate_cab_sale(sale_data.customer_id, sale_data.quantity, accessories)

    result = repo.sell_cab(
        cab_id=cab_id,
        customer_id=sale_data.customer_id,
        quantity=sale_data.quantity,
        sold_by=current_user.id,
        accessories=accessories,
    )

    return {
        "cab_id": result.cab_id,
        "customer_id": result.customer_id,
        "quantity": result.quantity,
        "accessories": [
            {
                "id": sold.id,
                "name": sold.name,
                "price": sold.unit_price,
                "quantity": sold.quantity,
                "unit_price": sold.unit_price,
                "subtotal": sold.subtotal,
            }
            for sold in result.accessories
        ],
        "total_price": result.total_price,
        "sale_date": result.sale_date,
        "sale_id": result.sale.id,
    }
