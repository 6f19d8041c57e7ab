from sqlalchemy import Column, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from biztime.api.core.db import Base


class Industry(Base):
    __tablename__ = "industries"

    industry = Column(String, primary_key=True)
    description = Column(Text, nullable=True)

    company_links = relationship(
        "CompanyIndustry",
        back_populates="industry",
        cascade="all, delete",
        order_by="CompanyIndustry.id",
    )


class CompanyIndustry(Base):
    """Join row between companies and industries."""

    __tablename__ = "companies_industries"
    __table_args__ = (UniqueConstraint("company_id", "industry_id"),)

    # Surrogate key; ordering by it gives insertion order
    id = Column(Integer, primary_key=True, autoincrement=True)

    company_id = Column(
        String,
        ForeignKey("companies.code", ondelete="CASCADE"),
        nullable=False,
    )
    industry_id = Column(
        String,
        ForeignKey("industries.industry", ondelete="CASCADE"),
        nullable=False,
    )

    company = relationship("Company", back_populates="industry_links")
    industry = relationship("Industry", back_populates="company_links")
