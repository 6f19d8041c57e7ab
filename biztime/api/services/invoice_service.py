from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from biztime.api.core.db import transaction
from biztime.api.core.errors import bad_request, not_found
from biztime.api.core.logging import get_logger
from biztime.api.models.company_model import Company
from biztime.api.models.invoice_model import Invoice
from biztime.api.schemas.invoice_schema import InvoiceCreate, InvoiceUpdate

logger = get_logger(__name__)

INCOMPLETE_JSON = "Error: incomplete JSON object provided in request."
INVOICE_NOT_FOUND = "Error: invoice can't be found."


class InvoiceService:
    """
    Data-access layer for invoices.

    Every mutation runs inside a single transaction, so the company
    existence check and the insert either both happen or neither does.
    """

    # ------------------------------------------------------------
    # Fetch all invoices
    # ------------------------------------------------------------
    def get_all_invoices(self, db: Session) -> List[Invoice]:
        return db.query(Invoice).order_by(Invoice.id).all()

    # ------------------------------------------------------------
    # Fetch single invoice by ID
    # ------------------------------------------------------------
    def get_invoice(self, db: Session, invoice_id: int) -> Optional[Invoice]:
        return db.query(Invoice).filter(Invoice.id == invoice_id).first()

    def get_invoice_detail(self, db: Session, invoice_id: int) -> dict:
        """Invoice fields with the owning company in place of comp_code."""
        invoice = self.get_invoice(db, invoice_id)
        if invoice is None:
            raise not_found(INVOICE_NOT_FOUND)

        company = db.query(Company).filter(Company.code == invoice.comp_code).first()
        if company is None:
            # Only reachable when the store does not enforce foreign keys
            raise not_found(f"Error: {invoice.comp_code} can't be found.")

        return {
            "id": invoice.id,
            "amt": invoice.amt,
            "paid": invoice.paid,
            "add_date": invoice.add_date,
            "paid_date": invoice.paid_date,
            "company": {
                "code": company.code,
                "name": company.name,
                "description": company.description,
            },
        }

    # ------------------------------------------------------------
    # Create
    # ------------------------------------------------------------
    def create_invoice(self, db: Session, payload: Optional[InvoiceCreate]) -> Invoice:
        if payload is None or not (payload.comp_code and payload.amt):
            logger.warning("Rejected invoice creation: incomplete body")
            raise bad_request(INCOMPLETE_JSON)

        with transaction(db):
            exists = (
                db.query(Company.code)
                .filter(Company.code == payload.comp_code)
                .first()
            )
            if exists is None:
                logger.warning("Rejected invoice for unknown company %s", payload.comp_code)
                raise bad_request(
                    f"Error: {payload.comp_code} is not an existing company within our database."
                )

            invoice = Invoice(
                comp_code=payload.comp_code,
                amt=payload.amt,
                paid=False,
                add_date=date.today(),
                paid_date=None,
            )
            db.add(invoice)

        db.refresh(invoice)
        logger.info("Created invoice #%s for %s", invoice.id, invoice.comp_code)
        return invoice

    # ------------------------------------------------------------
    # Update amount and payment state
    # ------------------------------------------------------------
    def update_invoice(
        self,
        db: Session,
        invoice_id: int,
        payload: Optional[InvoiceUpdate],
    ) -> Invoice:
        """
        paid false -> true stamps paid_date with today's date,
        paid true -> true keeps the existing paid_date,
        paid false clears paid_date,
        paid omitted leaves the payment state alone.
        """
        if payload is None or not payload.amt:
            raise bad_request(INCOMPLETE_JSON)

        with transaction(db):
            invoice = self.get_invoice(db, invoice_id)
            if invoice is None:
                raise not_found(
                    "Error: invoice could not be updated. "
                    "Please provide valid JSON and a valid invoice id."
                )

            invoice.amt = payload.amt

            if payload.paid is True and not invoice.paid:
                invoice.paid = True
                invoice.paid_date = date.today()
            elif payload.paid is False:
                invoice.paid = False
                invoice.paid_date = None

        db.refresh(invoice)
        logger.info("Updated invoice #%s", invoice.id)
        return invoice

    # ------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------
    def delete_invoice(self, db: Session, invoice_id: int) -> None:
        with transaction(db):
            invoice = self.get_invoice(db, invoice_id)
            if invoice is None:
                raise not_found(INVOICE_NOT_FOUND)

            db.delete(invoice)

        logger.info("Deleted invoice #%s", invoice_id)

    # ------------------------------------------------------------
    # Company with all of its invoices
    # ------------------------------------------------------------
    def get_company_with_invoices(self, db: Session, code: str) -> dict:
        """invoices is always a list, empty when the company has none."""
        company = db.query(Company).filter(Company.code == code).first()
        if company is None:
            raise not_found(f"Error: {code} can't be found.")

        invoices = (
            db.query(Invoice)
            .filter(Invoice.comp_code == code)
            .order_by(Invoice.id)
            .all()
        )

        return {
            "code": company.code,
            "name": company.name,
            "description": company.description,
            "invoices": invoices,
        }


invoice_service = InvoiceService()
