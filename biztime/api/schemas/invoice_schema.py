from pydantic import BaseModel
from typing import List, Optional
from datetime import date

from biztime.api.schemas.company_schema import CompanyOut


# ============================================================
# Create / Update Schemas
# ============================================================
class InvoiceCreate(BaseModel):
    comp_code: Optional[str] = None
    amt: Optional[float] = None


class InvoiceUpdate(BaseModel):
    amt: Optional[float] = None
    # None leaves the payment state untouched
    paid: Optional[bool] = None


# ============================================================
# OUT Schemas
# ============================================================
class InvoiceSummary(BaseModel):
    id: int
    comp_code: str

    class Config:
        from_attributes = True


class InvoiceOut(BaseModel):
    id: int
    comp_code: str
    amt: float
    paid: bool
    add_date: date
    paid_date: Optional[date] = None

    class Config:
        from_attributes = True


class InvoiceDetail(BaseModel):
    """Invoice with its company embedded in place of comp_code."""

    id: int
    amt: float
    paid: bool
    add_date: date
    paid_date: Optional[date] = None
    company: CompanyOut

    class Config:
        from_attributes = True


class InvoiceListResponse(BaseModel):
    invoices: List[InvoiceSummary]


class InvoiceResponse(BaseModel):
    invoice: InvoiceOut


class InvoiceDetailResponse(BaseModel):
    invoice: List[InvoiceDetail]


class CompanyWithInvoices(CompanyOut):
    invoices: List[InvoiceOut] = []


class CompanyInvoicesResponse(BaseModel):
    company: CompanyWithInvoices
