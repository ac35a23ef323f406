# surplus_sales/routers/materials.py

import math

from fastapi import APIRouter, Depends, Query, status

from surplus_sales.core.auth import get_current_user
from surplus_sales.core.deps import get_material_repository
from surplus_sales.repositories.materials import MaterialRepository
from surplus_sales.schemas.material import (
    MaterialCreate,
    MaterialUpdate,
    MaterialResponse,
    MaterialPage,
)

router = APIRouter(
    prefix="/materials",
    tags=["Materials"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[MaterialResponse])
def list_materials(
    search: str | None = Query(None),
    category: str | None = Query(None),
    supplier: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    repo: MaterialRepository = Depends(get_material_repository),
):
    return repo.list(
        {
            "search": search,
            "category": category,
            "supplier": supplier,
            "status": status_filter,
        }
    )


@router.get("/paginated", response_model=MaterialPage)
def list_materials_paginated(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: str | None = Query(None),
    category: str | None = Query(None),
    supplier: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    repo: MaterialRepository = Depends(get_material_repository),
):
    materials, total = repo.paginate(
        page,
        limit,
        {
            "search": search,
            "category": category,
            "supplier": supplier,
            "status": status_filter,
        },
    )

    return {
        "materials": materials,
        "total": total,
        "page": page,
        "limit": limit,
        "total_pages": math.ceil(total / limit),
    }


@router.get("/{material_id}", response_model=MaterialResponse)
def get_material(
    material_id: int,
    repo: MaterialRepository = Depends(get_material_repository),
):
    return repo.get(material_id)


@router.post(
    "",
    response_model=MaterialResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_material(
    material_data: MaterialCreate,
    repo: MaterialRepository = Depends(get_material_repository),
):
    return repo.create(material_data.model_dump())


@router.put("/{material_id}", response_model=MaterialResponse)
def update_material(
    material_id: int,
    material_data: MaterialUpdate,
    repo: MaterialRepository = Depends(get_material_repository),
):
    return repo.update(material_id, material_data.model_dump(exclude_unset=True))


@router.delete("/{material_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_material(
    material_id: int,
    repo: MaterialRepository = Depends(get_material_repository),
):
    repo.delete(material_id)
    return None
