from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.dependencies import require_admin
from jobly.errors import BadRequestError, validation_messages
from jobly.schemas.job import (
    JobCreate,
    JobDeleted,
    JobDetailEnvelope,
    JobEnvelope,
    JobListResponse,
    JobSearch,
    JobUpdate,
)
from jobly.services import job_service

router = APIRouter(prefix="/jobs", tags=["jobs"])


def job_search_filters(request: Request) -> JobSearch:
    """Decode the query string into a JobSearch.

    ``minimumSalary`` arrives as text and is converted to a number first;
    ``equityCheck`` is true only for the exact string ``"true"``.
    """
    params: dict = dict(request.query_params)
    if "minimumSalary" in params:
        try:
            params["minimumSalary"] = float(params["minimumSalary"])
        except ValueError:
            raise BadRequestError(["minimumSalary: must be a number"]) from None
    params["equityCheck"] = params.get("equityCheck") == "true"

    try:
        return JobSearch.model_validate(params)
    except ValidationError as exc:
        raise BadRequestError(validation_messages(exc.errors())) from exc


@router.post("", response_model=JobEnvelope, status_code=201, dependencies=[Depends(require_admin)])
async def create_job(req: JobCreate, db: Session = Depends(get_db)):
    return {"job": job_service.create_job(db, req)}


@router.get("", response_model=JobListResponse)
async def list_jobs(
    filters: JobSearch = Depends(job_search_filters),
    db: Session = Depends(get_db),
):
    return {"jobs": job_service.find_all_jobs(db, filters)}


@router.get("/{job_id}", response_model=JobDetailEnvelope)
async def get_job(job_id: int, db: Session = Depends(get_db)):
    return {"job": job_service.get_job(db, job_id)}


@router.patch("/{job_id}", response_model=JobEnvelope, dependencies=[Depends(require_admin)])
async def update_job(job_id: int, req: JobUpdate, db: Session = Depends(get_db)):
    return {"job": job_service.update_job(db, job_id, req)}


@router.delete("/{job_id}", response_model=JobDeleted, dependencies=[Depends(require_admin)])
async def delete_job(job_id: int, db: Session = Depends(get_db)):
    job_service.remove_job(db, job_id)
    return {"deleted": str(job_id)}
