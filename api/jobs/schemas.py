"""
Pydantic schemas for job endpoints.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JobCreateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1)
    salary: int | None = Field(default=None, ge=0, le=2**31 - 1)
    equity: Decimal | None = Field(default=None, ge=0, le=1)
    companyHandle: str = Field(..., min_length=1, max_length=25)


class JobUpdateRequest(BaseModel):
    """
    Partial update. The owning company cannot be changed, so
    `companyHandle` is rejected as an unknown field.
    title is NOT NULL and refuses an explicit null.
    """

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0, le=2**31 - 1)
    equity: Decimal | None = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def _not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class JobFilterQuery(BaseModel):
    title: str | None = None
    hasEquity: str | None = None
    minSalary: str | None = None


class Job(BaseModel):
    id: int
    title: str
    salary: int | None = None
    equity: str | None = None
    companyHandle: str
