"""
Company business logic.

Translates repository outcomes into HTTP errors:
- invalid filter/update input -> 400
- duplicate handle            -> 400
- unknown handle              -> 404
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg
from fastapi import HTTPException, status

from core import sql

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found(handle: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"No company: {handle}",
    )


def _to_company(row: dict) -> schemas.Company:
    return schemas.Company(
        handle=str(row["handle"]),
        name=str(row["name"]),
        description=str(row["description"]),
        numEmployees=row.get("numEmployees"),
        logoUrl=row.get("logoUrl"),
    )


async def create_company(payload: schemas.CompanyCreateRequest) -> schemas.Company:
    try:
        row = await repository.create_company(
            handle=payload.handle,
            name=payload.name,
            description=payload.description,
            num_employees=payload.numEmployees,
            logo_url=payload.logoUrl,
        )
    except asyncpg.UniqueViolationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Duplicate company: {payload.handle}",
        ) from exc

    logger.info("company_created handle=%s", payload.handle)
    return _to_company(row)


async def find_companies(criteria: dict[str, Any]) -> list[schemas.Company]:
    """
    List companies, narrowed by any criteria that were actually supplied.
    """
    criteria = {k: v for k, v in criteria.items() if v is not None}
    if not criteria:
        rows = await repository.list_companies()
        return [_to_company(row) for row in rows]

    try:
        rows = await repository.filter_companies(criteria)
    except sql.InvalidInputError as exc:
        logger.info("company_filter_rejected reason=%s", exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    return [_to_company(row) for row in rows]


async def get_company(handle: str) -> schemas.CompanyWithJobs:
    row = await repository.get_company(handle)
    if row is None:
        raise _not_found(handle)

    jobs = await repository.list_company_jobs(handle)
    company = _to_company(row)
    return schemas.CompanyWithJobs(
        **company.model_dump(),
        jobs=[schemas.CompanyJob(**job) for job in jobs],
    )


async def update_company(handle: str, payload: schemas.CompanyUpdateRequest) -> schemas.Company:
    data = payload.model_dump(exclude_unset=True)
    try:
        row = await repository.update_company(handle, data)
    except sql.InvalidInputError as exc:
        logger.info("company_update_rejected handle=%s reason=%s", handle, exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    except asyncpg.UniqueViolationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Duplicate company name: {data.get('name')}",
        ) from exc

    if row is None:
        raise _not_found(handle)

    logger.info("company_updated handle=%s fields=%s", handle, ",".join(data))
    return _to_company(row)


async def delete_company(handle: str) -> str:
    row = await repository.delete_company(handle)
    if row is None:
        raise _not_found(handle)

    logger.info("company_deleted handle=%s", handle)
    return str(row["handle"])
