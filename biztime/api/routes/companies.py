from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session
from biztime.api.core.db import get_db
from biztime.api.schemas.company_schema import (
    CompanyCreate,
    CompanyDetail,
    CompanyListResponse,
    CompanyOut,
    CompanyResponse,
    CompanySummary,
    CompanyUpdate,
    DeletedResponse,
)
from biztime.api.services.company_service import (
    create_company,
    delete_company,
    get_company_detail,
    list_companies,
    update_company,
)

router = APIRouter()


@router.get("/", response_model=CompanyListResponse)
def list_companies_route(db: Session = Depends(get_db)):
    companies = [CompanySummary.model_validate(c) for c in list_companies(db)]
    return CompanyListResponse(companies=companies)


@router.get("/{code}", response_model=CompanyDetail, response_model_exclude_unset=True)
def get_company_route(code: str, db: Session = Depends(get_db)):
    return CompanyDetail(**get_company_detail(db, code))


@router.post("/", response_model=CompanyResponse)
def create_company_route(
    payload: Optional[CompanyCreate] = Body(None),
    db: Session = Depends(get_db),
):
    company = create_company(db, payload)
    return CompanyResponse(company=CompanyOut.model_validate(company))


@router.put("/{code}", response_model=CompanyResponse)
def update_company_route(
    code: str,
    payload: Optional[CompanyUpdate] = Body(None),
    db: Session = Depends(get_db),
):
    company = update_company(db, code, payload)
    return CompanyResponse(company=CompanyOut.model_validate(company))


@router.delete("/{code}", response_model=DeletedResponse)
def delete_company_route(code: str, db: Session = Depends(get_db)):
    delete_company(db, code)
    return DeletedResponse()
