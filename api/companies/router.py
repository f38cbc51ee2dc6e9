"""
Company API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies

from . import schemas, service

router = APIRouter()


@router.post("/companies", status_code=status.HTTP_201_CREATED)
async def create_company(
    request: schemas.CompanyCreateRequest,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    company = await service.create_company(request)
    return {"company": company}


@router.get("/companies")
async def list_companies(
    name: str | None = Query(default=None, max_length=500),
    min_employees: str | None = Query(default=None, alias="minEmployees"),
    max_employees: str | None = Query(default=None, alias="maxEmployees"),
) -> dict:
    """
    All companies, or those matching name / minEmployees / maxEmployees.
    """
    criteria = schemas.CompanyFilterQuery(
        name=name,
        minEmployees=min_employees,
        maxEmployees=max_employees,
    )
    companies = await service.find_companies(criteria.model_dump())
    return {"companies": companies}


@router.get("/companies/{handle}")
async def get_company(handle: str) -> dict:
    company = await service.get_company(handle)
    return {"company": company}


@router.patch("/companies/{handle}")
async def update_company(
    handle: str,
    request: schemas.CompanyUpdateRequest,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    company = await service.update_company(handle, request)
    return {"company": company}


@router.delete("/companies/{handle}")
async def delete_company(
    handle: str,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    deleted = await service.delete_company(handle)
    return {"deleted": deleted}
