"""Data access for the jobs table."""

import logging
from typing import Any

from sqlalchemy.orm import Session

from jobly.database import query
from jobly.errors import NotFoundError
from jobly.helpers.sql import sql_for_partial_update, sql_job_query_search
from jobly.schemas.job import JobCreate, JobSearch, JobUpdate

logger = logging.getLogger(__name__)

_JOB_COLUMNS = """id,
               title,
               salary,
               equity,
               company_handle AS "companyHandle\""""


def create_job(db: Session, data: JobCreate) -> dict[str, Any]:
    """Insert a job and return it as ``{id, title, salary, equity, companyHandle}``.

    The company handle is not checked here; a missing company surfaces as the
    storage layer's foreign-key error.
    """
    rows = query(
        db,
        f"""INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {_JOB_COLUMNS}""",
        [data.title, data.salary, data.equity, data.company_handle],
    )
    db.commit()
    job = rows[0]
    logger.info("Created job %s for company %s", job["id"], job["companyHandle"])
    return job


def find_all_jobs(db: Session, filters: JobSearch | None = None) -> list[dict[str, Any]]:
    """List jobs matching ``filters``, ordered by title."""
    sql = f"SELECT {_JOB_COLUMNS} FROM jobs"

    where_cols, values = sql_job_query_search(filters)
    if where_cols:
        sql += f" WHERE {where_cols}"
    sql += " ORDER BY title"

    return query(db, sql, values)


def get_job(db: Session, job_id: int) -> dict[str, Any]:
    """Return one job with its company nested under ``company``.

    The company is read in a second query; if it has disappeared in between,
    ``company`` is ``None``.
    """
    rows = query(db, f"SELECT {_JOB_COLUMNS} FROM jobs WHERE id = $1", [job_id])
    if not rows:
        raise NotFoundError(f"No job: {job_id}")
    job = rows[0]

    companies = query(
        db,
        """SELECT handle,
                  name,
                  description,
                  num_employees AS "numEmployees",
                  logo_url AS "logoUrl"
           FROM companies
           WHERE handle = $1""",
        [job.pop("companyHandle")],
    )
    job["company"] = companies[0] if companies else None
    return job


def update_job(db: Session, job_id: int, data: JobUpdate) -> dict[str, Any]:
    """Apply a partial update; only the fields set on ``data`` change."""
    set_cols, values = sql_for_partial_update(
        data.model_dump(by_alias=True, exclude_unset=True),
        {"companyHandle": "company_handle"},
    )
    id_idx = f"${len(values) + 1}"

    rows = query(
        db,
        f"""UPDATE jobs
            SET {set_cols}
            WHERE id = {id_idx}
            RETURNING {_JOB_COLUMNS}""",
        [*values, job_id],
    )
    if not rows:
        raise NotFoundError(f"No job: {job_id}")
    db.commit()
    logger.info("Updated job %s", job_id)
    return rows[0]


def remove_job(db: Session, job_id: int) -> int:
    rows = query(db, "DELETE FROM jobs WHERE id = $1 RETURNING id", [job_id])
    if not rows:
        raise NotFoundError(f"No job: {job_id}")
    db.commit()
    logger.info("Deleted job %s", job_id)
    return rows[0]["id"]
