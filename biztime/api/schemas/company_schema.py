from pydantic import BaseModel
from typing import List, Optional


# ============================================================
# Request bodies
# Every field is optional so that presence checks happen in the
# service layer and produce the API's own error messages.
# ============================================================
class CompanyCreate(BaseModel):
    code: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


class CompanyUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


# ============================================================
# OUT schemas
# ============================================================
class CompanySummary(BaseModel):
    code: str
    name: str

    class Config:
        from_attributes = True


class CompanyOut(CompanySummary):
    description: Optional[str] = None


class IndustryLink(BaseModel):
    industry_id: str

    class Config:
        from_attributes = True


class CompanyDetail(CompanyOut):
    # Left unset (and so omitted) when the company has no industries
    industries: Optional[List[IndustryLink]] = None


class CompanyListResponse(BaseModel):
    companies: List[CompanySummary]


class CompanyResponse(BaseModel):
    company: CompanyOut


class DeletedResponse(BaseModel):
    status: str = "deleted"
