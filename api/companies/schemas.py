"""
Pydantic schemas for company endpoints.

Request/response bodies use the API's camelCase names; the repository maps
them to snake_case columns.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CompanyCreateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Must satisfy CHECK (handle = lower(handle)).
    handle: str = Field(..., min_length=1, max_length=25, pattern=r"^[a-z0-9_-]+$")
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    numEmployees: int | None = Field(default=None, ge=0, le=2**31 - 1)
    logoUrl: str | None = Field(default=None, max_length=2000)


class CompanyUpdateRequest(BaseModel):
    """
    Partial update: only fields sent by the client are changed.
    An explicit null clears numEmployees or logoUrl; name and description
    are NOT NULL columns and refuse null.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    numEmployees: int | None = Field(default=None, ge=0, le=2**31 - 1)
    logoUrl: str | None = Field(default=None, max_length=2000)

    @field_validator("name", "description")
    @classmethod
    def _not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class CompanyFilterQuery(BaseModel):
    # Kept as raw strings; numeric validation happens in core.sql.
    name: str | None = None
    minEmployees: str | None = None
    maxEmployees: str | None = None


class CompanyJob(BaseModel):
    id: int
    title: str
    salary: int | None = None
    equity: str | None = None


class Company(BaseModel):
    handle: str
    name: str
    description: str
    numEmployees: int | None = None
    logoUrl: str | None = None


class CompanyWithJobs(Company):
    jobs: list[CompanyJob] = Field(default_factory=list)
