from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session
from biztime.api.core.db import get_db
from biztime.api.schemas.industry_schema import (
    CompanyIndustryOut,
    IndustryAssociate,
    IndustryCreate,
    IndustryListResponse,
    IndustryOut,
    IndustryResponse,
)
from biztime.api.services.industry_service import (
    associate_company,
    create_industry,
    get_industry_detail,
    list_industries,
)

router = APIRouter()


@router.get("/", response_model=IndustryListResponse, response_model_exclude_unset=True)
def list_industries_route(db: Session = Depends(get_db)):
    industries = [IndustryOut(**row) for row in list_industries(db)]
    return IndustryListResponse(industries=industries)


@router.get("/{industry}", response_model=IndustryResponse, response_model_exclude_unset=True)
def get_industry_route(industry: str, db: Session = Depends(get_db)):
    return IndustryResponse(industry=IndustryOut(**get_industry_detail(db, industry)))


@router.post("/", response_model=IndustryResponse, response_model_exclude_unset=True)
def create_industry_route(
    payload: Optional[IndustryCreate] = Body(None),
    db: Session = Depends(get_db),
):
    industry = create_industry(db, payload)
    return IndustryResponse(
        industry=IndustryOut(industry=industry.industry, description=industry.description)
    )


@router.post("/{industry}", response_model=CompanyIndustryOut)
def associate_company_route(
    industry: str,
    payload: Optional[IndustryAssociate] = Body(None),
    db: Session = Depends(get_db),
):
    link = associate_company(db, industry, payload)
    return CompanyIndustryOut.model_validate(link)
