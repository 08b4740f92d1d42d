from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from sqlalchemy.orm import Session

from jobly.database import get_db
from jobly.errors import BadRequestError, validation_messages
from jobly.schemas.company import CompanyDetailEnvelope, CompanyListResponse, CompanySearch
from jobly.services import company_service

router = APIRouter(prefix="/companies", tags=["companies"])


def company_search_filters(request: Request) -> CompanySearch:
    try:
        return CompanySearch.model_validate(dict(request.query_params))
    except ValidationError as exc:
        raise BadRequestError(validation_messages(exc.errors())) from exc


@router.get("", response_model=CompanyListResponse)
async def list_companies(
    filters: CompanySearch = Depends(company_search_filters),
    db: Session = Depends(get_db),
):
    return {"companies": company_service.find_all_companies(db, filters)}


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
async def get_company(handle: str, db: Session = Depends(get_db)):
    return {"company": company_service.get_company(db, handle)}
