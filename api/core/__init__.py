"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks used by several features: DB wiring
(`db`) and the dynamic SQL fragment builders (`sql`). Resource-specific SQL
and business rules live in the feature packages (`companies/`, `jobs/`).
"""
