# =========================================================
# SALES ROUTER
#
# Sales are created only through POST /cabs/{id}/sell.
# This router reads and corrects existing ones.
# total_price is never editable.
# =========================================================

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from surplus_sales.core.auth import get_current_user
from surplus_sales.core.deps import get_sale_repository
from surplus_sales.repositories.sales import SaleRepository
from surplus_sales.schemas.sale import SaleResponse, SaleUpdate, SaleItemResponse

router = APIRouter(
    prefix="/sales",
    tags=["Sales"],
    dependencies=[Depends(get_current_user)],
)


# ===============================
# LIST SALES
# ===============================
@router.get("", response_model=list[SaleResponse])
def list_sales(
    customer_id: str | None = Query(None),
    sold_by: str | None = Query(None),
    date_from: date | None = Query(None),
    date_to: date | None = Query(None),
    repo: SaleRepository = Depends(get_sale_repository),
):
    return repo.list(
        {
            "customer_id": customer_id,
            "sold_by": sold_by,
            "date_from": date_from,
            "date_to": date_to,
        }
    )


# ===============================
# SALE DETAILS
# ===============================
@router.get("/{sale_id}", response_model=SaleResponse)
def get_sale(sale_id: str, repo: SaleRepository = Depends(get_sale_repository)):
    return repo.get(sale_id)


@router.get("/{sale_id}/items", response_model=list[SaleItemResponse])
def get_sale_items(
    sale_id: str,
    repo: SaleRepository = Depends(get_sale_repository),
):
    return repo.items(sale_id)


# ===============================
# CORRECT / REMOVE
# ===============================
@router.put("/{sale_id}", response_model=SaleResponse)
def update_sale(
    sale_id: str,
    sale_data: SaleUpdate,
    repo: SaleRepository = Depends(get_sale_repository),
):
    return repo.update(sale_id, sale_data.model_dump(exclude_unset=True))


@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sale(sale_id: str, repo: SaleRepository = Depends(get_sale_repository)):
    repo.delete(sale_id)
    return None
