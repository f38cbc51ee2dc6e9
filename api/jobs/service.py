"""
Job business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from companies import repository as company_repository
from core import sql

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found(job_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"No job under ID: {job_id}",
    )


def _bad_request(exc: Exception) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=str(exc),
    )


def _to_job(row: dict) -> schemas.Job:
    equity = row.get("equity")
    return schemas.Job(
        id=int(row["id"]),
        title=str(row["title"]),
        salary=row.get("salary"),
        equity=str(equity) if equity is not None else None,
        companyHandle=str(row["companyHandle"]),
    )


async def create_job(payload: schemas.JobCreateRequest) -> schemas.Job:
    if not await company_repository.company_exists(payload.companyHandle):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"No company under handle: {payload.companyHandle}",
        )

    row = await repository.create_job(
        title=payload.title,
        salary=payload.salary,
        equity=payload.equity,
        company_handle=payload.companyHandle,
    )
    job = _to_job(row)
    logger.info("job_created id=%s company_handle=%s", job.id, job.companyHandle)
    return job


async def find_jobs(criteria: dict[str, Any]) -> list[schemas.Job]:
    criteria = {k: v for k, v in criteria.items() if v is not None}
    if not criteria:
        rows = await repository.list_jobs()
        return [_to_job(row) for row in rows]

    try:
        rows = await repository.filter_jobs(criteria)
    except sql.InvalidInputError as exc:
        logger.info("job_filter_rejected reason=%s", exc)
        raise _bad_request(exc) from exc
    return [_to_job(row) for row in rows]


async def get_job(job_id: int) -> schemas.Job:
    row = await repository.get_job(job_id)
    if row is None:
        raise _not_found(job_id)
    return _to_job(row)


async def update_job(job_id: int, payload: schemas.JobUpdateRequest) -> schemas.Job:
    data = payload.model_dump(exclude_unset=True)
    try:
        row = await repository.update_job(job_id, data)
    except sql.InvalidInputError as exc:
        logger.info("job_update_rejected id=%s reason=%s", job_id, exc)
        raise _bad_request(exc) from exc

    if row is None:
        raise _not_found(job_id)

    logger.info("job_updated id=%s fields=%s", job_id, ",".join(data))
    return _to_job(row)


async def delete_job(job_id: int) -> str:
    row = await repository.delete_job(job_id)
    if row is None:
        raise _not_found(job_id)

    logger.info("job_deleted id=%s", job_id)
    return str(row["id"])
