from typing import List, Optional

from sqlalchemy.orm import Session

from biztime.api.core.db import transaction
from biztime.api.core.errors import bad_request, not_found
from biztime.api.core.logging import get_logger
from biztime.api.core.slug import slugify
from biztime.api.models.company_model import Company
from biztime.api.models.industry_model import CompanyIndustry
from biztime.api.schemas.company_schema import CompanyCreate, CompanyUpdate

logger = get_logger(__name__)

INCOMPLETE_JSON = "Error: incomplete JSON object provided in request."


def list_companies(db: Session) -> List[Company]:
    return db.query(Company).all()


def get_company(db: Session, code: str) -> Optional[Company]:
    return db.query(Company).filter(Company.code == code).first()


def get_company_detail(db: Session, code: str) -> dict:
    """
    Company fields plus its industry links, in insertion order.
    The "industries" key is only present when there is at least one link.
    """
    company = get_company(db, code)
    if company is None:
        raise not_found(f"Error: {code} can't be found.")

    detail = {
        "code": company.code,
        "name": company.name,
        "description": company.description,
    }

    links = (
        db.query(CompanyIndustry.industry_id)
        .filter(CompanyIndustry.company_id == code)
        .order_by(CompanyIndustry.id)
        .all()
    )
    if links:
        detail["industries"] = [{"industry_id": row.industry_id} for row in links]

    return detail


def create_company(db: Session, payload: Optional[CompanyCreate]) -> Company:
    if payload is None or not (payload.code and payload.name and payload.description):
        logger.warning("Rejected company creation: incomplete body")
        raise bad_request(INCOMPLETE_JSON)

    code = slugify(payload.code)
    if not code:
        logger.warning("Rejected company creation: code has no usable characters")
        raise bad_request(INCOMPLETE_JSON)

    with transaction(db):
        if get_company(db, code) is not None:
            raise bad_request(f"Error: {code} already exists.")

        company = Company(
            code=code,
            name=payload.name,
            description=payload.description,
        )
        db.add(company)

    db.refresh(company)
    logger.info("Created company %s", company.code)
    return company


def update_company(db: Session, code: str, payload: Optional[CompanyUpdate]) -> Company:
    # Validation failures on this route are reported as 404
    if payload is None or not (payload.name and payload.description):
        raise not_found("Error: Please provide valid JSON and a valid code.")

    with transaction(db):
        company = get_company(db, code)
        if company is None:
            raise not_found(
                f"Error: {code} could not be updated. "
                "Please provide valid JSON and a valid code."
            )

        company.name = payload.name
        company.description = payload.description

    db.refresh(company)
    logger.info("Updated company %s", company.code)
    return company


def delete_company(db: Session, code: str) -> None:
    """Deletes the company along with its invoices and industry links."""
    with transaction(db):
        company = get_company(db, code)
        if company is None:
            raise not_found(f"Error: {code} can't be found")

        db.delete(company)

    logger.info("Deleted company %s", code)
