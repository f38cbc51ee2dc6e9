"""
Job persistence (raw SQL).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from core import db, sql

COLUMN_NAMES = {
    "companyHandle": "company_handle",
}

# equity is NUMERIC; return it as text so "0.30" round-trips unchanged.
_JOB_COLUMNS = """
    id,
    title,
    salary,
    equity::text AS equity,
    company_handle AS "companyHandle"
"""


async def create_job(
    *,
    title: str,
    salary: int | None,
    equity: Decimal | None,
    company_handle: str,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO jobs (title, salary, equity, company_handle)
        VALUES ($1, $2, $3, $4)
        RETURNING {_JOB_COLUMNS}
        """,
        title,
        salary,
        equity,
        company_handle,
    )
    if row is None:
        raise RuntimeError("Failed to create job.")
    return row


async def list_jobs() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_JOB_COLUMNS}
        FROM jobs
        ORDER BY title, id
        """
    )


async def filter_jobs(criteria: dict[str, Any]) -> list[dict]:
    """
    Search jobs by title substring, equity presence and minimum salary.

    Raises `sql.InvalidInputError` on empty or invalid criteria.
    """
    where = sql.sql_for_job_filter(criteria).unwrap()
    if not where.fragment:
        return await list_jobs()
    return await db.fetch_all(
        f"""
        SELECT {_JOB_COLUMNS}
        FROM jobs
        WHERE {where.fragment}
        ORDER BY title, id
        """,
        *where.values,
    )


async def get_job(job_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_JOB_COLUMNS}
        FROM jobs
        WHERE id = $1
        """,
        job_id,
    )


async def update_job(job_id: int, data: dict[str, Any]) -> dict | None:
    set_clause = sql.sql_for_partial_update(data, COLUMN_NAMES).unwrap()
    id_idx = len(set_clause.values) + 1
    return await db.fetch_one(
        f"""
        UPDATE jobs
        SET {set_clause.fragment}
        WHERE id = ${id_idx}
        RETURNING {_JOB_COLUMNS}
        """,
        *set_clause.values,
        job_id,
    )


async def delete_job(job_id: int) -> dict | None:
    return await db.fetch_one(
        """
        DELETE FROM jobs
        WHERE id = $1
        RETURNING id
        """,
        job_id,
    )
