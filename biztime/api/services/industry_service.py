from typing import List, Optional

from sqlalchemy.orm import Session

from biztime.api.core.db import transaction
from biztime.api.core.errors import bad_request, not_found
from biztime.api.core.logging import get_logger
from biztime.api.models.company_model import Company
from biztime.api.models.industry_model import CompanyIndustry, Industry
from biztime.api.schemas.industry_schema import IndustryAssociate, IndustryCreate

logger = get_logger(__name__)


def _company_codes(db: Session, industry: str) -> List[str]:
    rows = (
        db.query(CompanyIndustry.company_id)
        .filter(CompanyIndustry.industry_id == industry)
        .order_by(CompanyIndustry.id)
        .all()
    )
    return [row.company_id for row in rows]


def _industry_to_dict(db: Session, industry: Industry) -> dict:
    out = {"industry": industry.industry, "description": industry.description}
    companies = _company_codes(db, industry.industry)
    if companies:
        out["companies"] = companies
    return out


def get_industry(db: Session, industry: str) -> Optional[Industry]:
    return db.query(Industry).filter(Industry.industry == industry).first()


def list_industries(db: Session) -> List[dict]:
    """All industries, each with the codes of its companies when it has any."""
    return [_industry_to_dict(db, row) for row in db.query(Industry).all()]


def get_industry_detail(db: Session, industry: str) -> dict:
    row = get_industry(db, industry)
    if row is None:
        raise not_found(f"Error: {industry} can't be found.")
    return _industry_to_dict(db, row)


def create_industry(db: Session, payload: Optional[IndustryCreate]) -> Industry:
    if payload is None or not (payload.industry and payload.description):
        raise bad_request("Error: please provide valid JSON.")

    with transaction(db):
        if get_industry(db, payload.industry) is not None:
            raise bad_request(f"Error: {payload.industry} already exists.")

        industry = Industry(industry=payload.industry, description=payload.description)
        db.add(industry)

    db.refresh(industry)
    logger.info("Created industry %s", industry.industry)
    return industry


def associate_company(
    db: Session, industry: str, payload: Optional[IndustryAssociate]
) -> CompanyIndustry:
    """Links an existing company to an existing industry."""
    if payload is None or not payload.code:
        raise bad_request("Error: Please provide valid JSON.")

    code = payload.code

    with transaction(db):
        if get_industry(db, industry) is None:
            raise not_found(f"Error: {industry} is not a valid industry in the database.")

        if db.query(Company.code).filter(Company.code == code).first() is None:
            raise not_found(f"Error: {code} is not a valid company in the database.")

        existing = (
            db.query(CompanyIndustry)
            .filter(
                CompanyIndustry.company_id == code,
                CompanyIndustry.industry_id == industry,
            )
            .first()
        )
        if existing is not None:
            raise bad_request(f"Error: {code} is already associated with {industry}.")

        link = CompanyIndustry(company_id=code, industry_id=industry)
        db.add(link)

    db.refresh(link)
    logger.info("Associated company %s with industry %s", code, industry)
    return link
