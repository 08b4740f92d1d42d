from typing import Any

from sqlalchemy.orm import Session

from jobly.database import query
from jobly.errors import NotFoundError
from jobly.helpers.sql import sql_query_search
from jobly.schemas.company import CompanySearch

_COMPANY_COLUMNS = """handle,
               name,
               description,
               num_employees AS "numEmployees",
               logo_url AS "logoUrl\""""


def find_all_companies(db: Session, filters: CompanySearch | None = None) -> list[dict[str, Any]]:
    sql = f"SELECT {_COMPANY_COLUMNS} FROM companies"

    where_cols, values = sql_query_search(filters)
    if where_cols:
        sql += f" WHERE {where_cols}"
    sql += " ORDER BY name"

    return query(db, sql, values)


def get_company(db: Session, handle: str) -> dict[str, Any]:
    """Return a company with its jobs, ``[{id, title, salary, equity}, ...]``."""
    rows = query(db, f"SELECT {_COMPANY_COLUMNS} FROM companies WHERE handle = $1", [handle])
    if not rows:
        raise NotFoundError(f"No company: {handle}")
    company = rows[0]

    company["jobs"] = query(
        db,
        """SELECT id, title, salary, equity
           FROM jobs
           WHERE company_handle = $1
           ORDER BY id""",
        [handle],
    )
    return company
