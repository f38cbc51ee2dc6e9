"""Unit tests for companies/jobs repositories (core.db patched)."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from companies import repository as company_repository
from core import db, sql
from jobs import repository as job_repository


def _normalize(statement: str) -> str:
    return " ".join(statement.split())


@pytest.fixture
def fetch_one(monkeypatch: pytest.MonkeyPatch) -> AsyncMock:
    mock = AsyncMock(return_value=None)
    monkeypatch.setattr(db, "fetch_one", mock)
    return mock


@pytest.fixture
def fetch_all(monkeypatch: pytest.MonkeyPatch) -> AsyncMock:
    mock = AsyncMock(return_value=[])
    monkeypatch.setattr(db, "fetch_all", mock)
    return mock


# =============================================================================
# Companies
# =============================================================================


@pytest.mark.asyncio
async def test_update_company_appends_handle_after_values(fetch_one: AsyncMock) -> None:
    fetch_one.return_value = {"handle": "c1", "name": "New"}

    row = await company_repository.update_company(
        "c1",
        {"name": "New", "numEmployees": 10, "logoUrl": None},
    )

    assert row == {"handle": "c1", "name": "New"}
    statement, *args = fetch_one.await_args.args
    statement = _normalize(statement)
    assert 'SET "name"=$1, "num_employees"=$2, "logo_url"=$3 WHERE handle = $4' in statement
    assert args == ["New", 10, None, "c1"]


@pytest.mark.asyncio
async def test_update_company_with_no_data_raises(fetch_one: AsyncMock) -> None:
    with pytest.raises(sql.InvalidInputError):
        await company_repository.update_company("c1", {})
    fetch_one.assert_not_awaited()


@pytest.mark.asyncio
async def test_filter_companies_splices_where_clause(fetch_all: AsyncMock) -> None:
    fetch_all.return_value = [{"handle": "c1"}]

    rows = await company_repository.filter_companies(
        {"name": "C", "minEmployees": "1", "maxEmployees": "3"}
    )

    assert rows == [{"handle": "c1"}]
    statement, *args = fetch_all.await_args.args
    assert 'WHERE "name" ILIKE $1 AND num_employees >= $2 AND num_employees <= $3' in _normalize(statement)
    assert args == ["%C%", 1, 3]


@pytest.mark.asyncio
async def test_filter_companies_invalid_range_raises(fetch_all: AsyncMock) -> None:
    with pytest.raises(sql.InvalidInputError):
        await company_repository.filter_companies({"minEmployees": 5, "maxEmployees": 1})
    fetch_all.assert_not_awaited()


@pytest.mark.asyncio
async def test_filter_companies_without_clauses_lists_all(fetch_all: AsyncMock) -> None:
    await company_repository.filter_companies({"name": ""})

    statement = _normalize(fetch_all.await_args.args[0])
    assert "WHERE" not in statement
    assert len(fetch_all.await_args.args) == 1


@pytest.mark.asyncio
async def test_delete_company_returns_none_when_missing(fetch_one: AsyncMock) -> None:
    assert await company_repository.delete_company("nope") is None
    assert fetch_one.await_args.args[1:] == ("nope",)


# =============================================================================
# Jobs
# =============================================================================


@pytest.mark.asyncio
async def test_update_job_appends_id_after_values(fetch_one: AsyncMock) -> None:
    await job_repository.update_job(7, {"title": "J4", "equity": Decimal("0.3")})

    statement, *args = fetch_one.await_args.args
    assert 'SET "title"=$1, "equity"=$2 WHERE id = $3' in _normalize(statement)
    assert args == ["J4", Decimal("0.3"), 7]


@pytest.mark.asyncio
async def test_filter_jobs_equity_clause_has_no_parameter(fetch_all: AsyncMock) -> None:
    await job_repository.filter_jobs({"title": "J", "hasEquity": "true", "minSalary": "1000"})

    statement, *args = fetch_all.await_args.args
    assert 'WHERE "title" ILIKE $1 AND "equity" > 0 AND "salary" >= $2' in _normalize(statement)
    assert args == ["%J%", 1000]


@pytest.mark.asyncio
async def test_filter_jobs_invalid_salary_raises(fetch_all: AsyncMock) -> None:
    with pytest.raises(sql.InvalidInputError, match="minSalary"):
        await job_repository.filter_jobs({"minSalary": "-5"})
    fetch_all.assert_not_awaited()
