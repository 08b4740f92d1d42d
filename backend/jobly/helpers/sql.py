"""Builders for parameterized SQL fragments.

Every builder returns the clause text plus the values to bind, in order, to
its ``$1``, ``$2``, ... placeholders.
"""

from typing import Any, Mapping

from jobly.errors import BadRequestError
from jobly.schemas.company import CompanySearch
from jobly.schemas.job import JobSearch


def sql_for_partial_update(
    data_to_update: Mapping[str, Any], js_to_sql: Mapping[str, str]
) -> tuple[str, list[Any]]:
    """Build the ``SET`` clause for a partial update.

    ``js_to_sql`` renames API field names to column names, e.g.
    ``{"companyHandle": "company_handle"}``; fields missing from it are used
    as-is, so only pass keys that came out of a validated update model.

        {"firstName": "Aliya", "age": 32}
        => ('"first_name"=$1, "age"=$2', ["Aliya", 32])
    """
    keys = list(data_to_update)
    if not keys:
        raise BadRequestError("No data")

    cols = [f'"{js_to_sql.get(name, name)}"=${idx}' for idx, name in enumerate(keys, start=1)]
    return ", ".join(cols), [data_to_update[name] for name in keys]


def sql_query_search(filters: CompanySearch | None = None) -> tuple[str, list[Any]]:
    """``WHERE`` fragment for company search; ``""`` when nothing is filtered."""
    filters = filters or CompanySearch()
    min_employees = filters.min_employees
    max_employees = filters.max_employees

    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise BadRequestError("minEmployees cannot be greater than maxEmployees")

    values: list[Any] = []
    where: list[str] = []

    if min_employees is not None:
        values.append(min_employees)
        where.append(f"num_employees >= ${len(values)}")
    if max_employees is not None:
        values.append(max_employees)
        where.append(f"num_employees <= ${len(values)}")
    if filters.name:
        values.append(f"%{filters.name}%")
        where.append(f"name ILIKE ${len(values)}")

    return " AND ".join(where), values


def sql_job_query_search(filters: JobSearch | None = None) -> tuple[str, list[Any]]:
    """``WHERE`` fragment for job search; ``""`` when nothing is filtered.

    ``equity > 0`` takes no parameter, so it does not advance the placeholder
    count.
    """
    filters = filters or JobSearch()

    values: list[Any] = []
    where: list[str] = []

    if filters.minimum_salary is not None:
        values.append(filters.minimum_salary)
        where.append(f"salary >= ${len(values)}")
    if filters.equity_check is True:
        where.append("equity > 0")
    if filters.title:
        values.append(f"%{filters.title}%")
        where.append(f"title ILIKE ${len(values)}")

    return " AND ".join(where), values
