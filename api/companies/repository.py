"""
Company persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db, sql

# API field name -> column name, for partial updates.
COLUMN_NAMES = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

_COMPANY_COLUMNS = """
    handle,
    name,
    description,
    num_employees AS "numEmployees",
    logo_url AS "logoUrl"
"""


async def create_company(
    *,
    handle: str,
    name: str,
    description: str,
    num_employees: int | None = None,
    logo_url: str | None = None,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO companies (handle, name, description, num_employees, logo_url)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {_COMPANY_COLUMNS}
        """,
        handle,
        name,
        description,
        num_employees,
        logo_url,
    )
    if row is None:
        raise RuntimeError("Failed to create company.")
    return row


async def company_exists(handle: str) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM companies
        WHERE handle = $1
        """,
        handle,
    )
    return row is not None


async def list_companies() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_COMPANY_COLUMNS}
        FROM companies
        ORDER BY name
        """
    )


async def filter_companies(criteria: dict[str, Any]) -> list[dict]:
    """
    Search companies by name substring and employee-count range.

    Raises `sql.InvalidInputError` on empty or invalid criteria.
    """
    where = sql.sql_for_company_filter(criteria).unwrap()
    if not where.fragment:
        return await list_companies()
    return await db.fetch_all(
        f"""
        SELECT {_COMPANY_COLUMNS}
        FROM companies
        WHERE {where.fragment}
        ORDER BY name
        """,
        *where.values,
    )


async def get_company(handle: str) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_COMPANY_COLUMNS}
        FROM companies
        WHERE handle = $1
        """,
        handle,
    )


async def list_company_jobs(handle: str) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, title, salary, equity::text AS equity
        FROM jobs
        WHERE company_handle = $1
        ORDER BY id
        """,
        handle,
    )


async def update_company(handle: str, data: dict[str, Any]) -> dict | None:
    """
    Partial update; only keys present in `data` are written.

    Returns None if no company has `handle`.
    """
    set_clause = sql.sql_for_partial_update(data, COLUMN_NAMES).unwrap()
    handle_idx = len(set_clause.values) + 1
    return await db.fetch_one(
        f"""
        UPDATE companies
        SET {set_clause.fragment}
        WHERE handle = ${handle_idx}
        RETURNING {_COMPANY_COLUMNS}
        """,
        *set_clause.values,
        handle,
    )


async def delete_company(handle: str) -> dict | None:
    return await db.fetch_one(
        """
        DELETE FROM companies
        WHERE handle = $1
        RETURNING handle
        """,
        handle,
    )
