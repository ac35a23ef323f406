# surplus_sales/routers/customers.py

from fastapi import APIRouter, Depends, status

from surplus_sales.core.auth import get_current_user
from surplus_sales.core.deps import get_customer_repository, get_sale_repository
from surplus_sales.repositories.customers import CustomerRepository
from surplus_sales.repositories.sales import SaleRepository
from surplus_sales.schemas.customer import (
    CustomerCreate,
    CustomerUpdate,
    CustomerResponse,
)
from surplus_sales.schemas.sale import SaleResponse

router = APIRouter(
    prefix="/customers",
    tags=["Customers"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[CustomerResponse])
def list_customers(repo: CustomerRepository = Depends(get_customer_repository)):
    return repo.list()


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(
    customer_id: str,
    repo: CustomerRepository = Depends(get_customer_repository),
):
    return repo.get(customer_id)


@router.get("/{customer_id}/sales", response_model=list[SaleResponse])
def list_customer_sales(
    customer_id: str,
    repo: SaleRepository = Depends(get_sale_repository),
):
    # Unknown customers simply have no sales
    return repo.list_for_customer(customer_id)


@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_customer(
    customer_data: CustomerCreate,
    repo: CustomerRepository = Depends(get_customer_repository),
):
    return repo.create(customer_data.model_dump())


@router.put("/{customer_id}", response_model=CustomerResponse)
def update_customer(
    customer_id: str,
    customer_data: CustomerUpdate,
    repo: CustomerRepository = Depends(get_customer_repository),
):
    return repo.update(customer_id, customer_data.model_dump(exclude_unset=True))


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    customer_id: str,
    repo: CustomerRepository = Depends(get_customer_repository),
):
    repo.delete(customer_id)
    return None
