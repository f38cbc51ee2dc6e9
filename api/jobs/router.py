"""
Job API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies

from . import schemas, service

router = APIRouter()


@router.post("/jobs", status_code=status.HTTP_201_CREATED)
async def create_job(
    request: schemas.JobCreateRequest,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    job = await service.create_job(request)
    return {"job": job}


@router.get("/jobs")
async def list_jobs(
    title: str | None = Query(default=None, max_length=500),
    has_equity: str | None = Query(default=None, alias="hasEquity"),
    min_salary: str | None = Query(default=None, alias="minSalary"),
) -> dict:
    criteria = schemas.JobFilterQuery(
        title=title,
        hasEquity=has_equity,
        minSalary=min_salary,
    )
    jobs = await service.find_jobs(criteria.model_dump())
    return {"jobs": jobs}


@router.get("/jobs/{job_id}")
async def get_job(job_id: int) -> dict:
    job = await service.get_job(job_id)
    return {"job": job}


@router.patch("/jobs/{job_id}")
async def update_job(
    job_id: int,
    request: schemas.JobUpdateRequest,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    job = await service.update_job(job_id, request)
    return {"job": job}


@router.delete("/jobs/{job_id}")
async def delete_job(
    job_id: int,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    deleted = await service.delete_job(job_id)
    return {"deleted": deleted}
