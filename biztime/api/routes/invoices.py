from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from biztime.api.core.db import get_db
from biztime.api.schemas.company_schema import DeletedResponse
from biztime.api.schemas.invoice_schema import (
    CompanyInvoicesResponse,
    CompanyWithInvoices,
    InvoiceCreate,
    InvoiceDetail,
    InvoiceDetailResponse,
    InvoiceListResponse,
    InvoiceOut,
    InvoiceResponse,
    InvoiceSummary,
    InvoiceUpdate,
)
from biztime.api.services.invoice_service import invoice_service

router = APIRouter()


@router.get("/", response_model=InvoiceListResponse)
def list_invoices(db: Session = Depends(get_db)):
    invoices = invoice_service.get_all_invoices(db)
    return InvoiceListResponse(
        invoices=[InvoiceSummary.model_validate(inv) for inv in invoices]
    )


@router.get("/companies/{code}", response_model=CompanyInvoicesResponse)
def get_company_invoices(code: str, db: Session = Depends(get_db)):
    data = invoice_service.get_company_with_invoices(db, code)
    data["invoices"] = [InvoiceOut.model_validate(inv) for inv in data["invoices"]]
    return CompanyInvoicesResponse(company=CompanyWithInvoices(**data))


@router.get("/{invoice_id}", response_model=InvoiceDetailResponse)
def get_invoice(invoice_id: int, db: Session = Depends(get_db)):
    detail = invoice_service.get_invoice_detail(db, invoice_id)
    return InvoiceDetailResponse(invoice=[InvoiceDetail(**detail)])


@router.post("/", response_model=InvoiceResponse)
def create_invoice(
    payload: Optional[InvoiceCreate] = Body(None),
    db: Session = Depends(get_db),
):
    invoice = invoice_service.create_invoice(db, payload)
    return InvoiceResponse(invoice=InvoiceOut.model_validate(invoice))


@router.put("/{invoice_id}", response_model=InvoiceResponse)
def update_invoice(
    invoice_id: int,
    payload: Optional[InvoiceUpdate] = Body(None),
    db: Session = Depends(get_db),
):
    invoice = invoice_service.update_invoice(db, invoice_id, payload)
    return InvoiceResponse(invoice=InvoiceOut.model_validate(invoice))


@router.delete("/{invoice_id}", response_model=DeletedResponse)
def delete_invoice(invoice_id: int, db: Session = Depends(get_db)):
    invoice_service.delete_invoice(db, invoice_id)
    return DeletedResponse()
