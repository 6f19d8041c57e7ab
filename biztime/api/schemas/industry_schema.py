from pydantic import BaseModel
from typing import List, Optional


class IndustryCreate(BaseModel):
    industry: Optional[str] = None
    description: Optional[str] = None


class IndustryAssociate(BaseModel):
    code: Optional[str] = None


class IndustryOut(BaseModel):
    industry: str
    description: Optional[str] = None
    # Company codes, left unset when the industry has none
    companies: Optional[List[str]] = None


class IndustryListResponse(BaseModel):
    industries: List[IndustryOut]


class IndustryResponse(BaseModel):
    industry: IndustryOut


class CompanyIndustryOut(BaseModel):
    company_id: str
    industry_id: str

    class Config:
        from_attributes = True
