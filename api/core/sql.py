"""
Dynamic SQL fragment builders (pure, no DB access).

Each builder returns either `Ok(fragment, values)` or `Err(kind, message)`.
The fragment uses asyncpg positional placeholders ($1, $2, ...) and
placeholder $k always binds `values[k - 1]`.

Callers splice the fragment into a larger statement:
- `UPDATE companies SET <fragment> WHERE handle = $<len(values) + 1>`
- `SELECT ... FROM jobs WHERE <fragment>`
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

_INT_RE = re.compile(r"^[+-]?\d+$")

# Bounds of a PostgreSQL INTEGER column.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1


class InvalidInputError(ValueError):
    pass


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"


@dataclass(frozen=True)
class Ok:
    fragment: str
    values: tuple[Any, ...]

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Ok:
        return self


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Ok:
        raise InvalidInputError(self.message)


BuildResult = Union[Ok, Err]


def _invalid(message: str) -> Err:
    return Err(ErrorKind.INVALID_INPUT, message)


def _pairs(data: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> list[tuple[str, Any]]:
    if isinstance(data, Mapping):
        return list(data.items())
    return [(str(key), value) for key, value in data]


def parse_int(value: Any) -> int | None:
    """
    Strict integer parse. Returns None for anything that is not a whole number
    (bools, fractional floats, "12abc", "", "1.5").
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        raw = value.strip()
        if not _INT_RE.match(raw):
            return None
        return int(raw)
    return None


def parse_int4(value: Any) -> int | None:
    """
    `parse_int`, but None when the value does not fit an INTEGER column.
    """
    parsed = parse_int(value)
    if parsed is None or not INT4_MIN <= parsed <= INT4_MAX:
        return None
    return parsed


def _present(criteria: dict[str, Any], key: str) -> bool:
    return criteria.get(key) is not None


def sql_for_partial_update(
    payload: Mapping[str, Any] | Iterable[tuple[str, Any]],
    name_map: Mapping[str, str] | None = None,
) -> BuildResult:
    """
    Build a `SET` fragment for a partial update.

    {"firstName": "Aliya", "age": 32} with {"firstName": "first_name"}
        -> '"first_name"=$1, "age"=$2', ("Aliya", 32)
    """
    pairs = _pairs(payload)
    if not pairs:
        return _invalid("No data to update.")

    columns = dict(name_map or {})
    cols = [f'"{columns.get(key, key)}"=${idx}' for idx, (key, _) in enumerate(pairs, start=1)]
    return Ok(", ".join(cols), tuple(value for _, value in pairs))


def sql_for_company_filter(criteria: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> BuildResult:
    """
    Build a `WHERE` predicate for company search.

    Supported keys: name (substring, case-insensitive), minEmployees, maxEmployees.
    """
    pairs = _pairs(criteria)
    if not pairs:
        return _invalid("No search criteria.")
    data = dict(pairs)

    clauses: list[str] = []
    values: list[Any] = []

    name = data.get("name")
    if name is not None and str(name) != "":
        values.append(f"%{name}%")
        clauses.append(f'"name" ILIKE ${len(values)}')

    has_min = _present(data, "minEmployees")
    has_max = _present(data, "maxEmployees")
    if has_min or has_max:
        min_employees = parse_int4(data.get("minEmployees")) if has_min else None
        max_employees = parse_int4(data.get("maxEmployees")) if has_max else None
        if (has_min and (min_employees is None or min_employees < 0)) or (
            has_max and (max_employees is None or max_employees < 0)
        ):
            return _invalid("Invalid min/max employee values.")

        if has_min and has_max:
            if min_employees > max_employees:
                return _invalid("Invalid min/max employee values.")
            values.append(min_employees)
            clauses.append(f"num_employees >= ${len(values)}")
            values.append(max_employees)
            clauses.append(f"num_employees <= ${len(values)}")
        elif has_min:
            values.append(min_employees)
            clauses.append(f"num_employees >= ${len(values)}")
        else:
            # Max-only is exclusive, unlike the combined range.
            values.append(max_employees)
            clauses.append(f"num_employees < ${len(values)}")

    return Ok(" AND ".join(clauses), tuple(values))


def sql_for_job_filter(criteria: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> BuildResult:
    """
    Build a `WHERE` predicate for job search.

    Supported keys: title (substring), hasEquity ("true" -> equity > 0), minSalary.
    The equity clause is a constant and does not take a placeholder.
    """
    pairs = _pairs(criteria)
    if not pairs:
        return _invalid("No search criteria.")
    data = dict(pairs)

    clauses: list[str] = []
    values: list[Any] = []

    title = data.get("title")
    if title is not None and str(title) != "":
        values.append(f"%{title}%")
        clauses.append(f'"title" ILIKE ${len(values)}')

    has_equity = data.get("hasEquity")
    if has_equity is not None and str(has_equity).strip().lower() == "true":
        clauses.append('"equity" > 0')

    if _present(data, "minSalary"):
        min_salary = parse_int4(data["minSalary"])
        if not min_salary or min_salary < 0:
            return _invalid("Invalid minSalary value.")
        values.append(min_salary)
        clauses.append(f'"salary" >= ${len(values)}')

    return Ok(" AND ".join(clauses), tuple(values))
