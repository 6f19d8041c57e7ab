from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from biztime.api.core.db import Base

class Company(Base):
    __tablename__ = "companies"

    # Always the slugified form of the submitted code
    code = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)

    # Relationship: one-to-many (companies → invoices)
    invoices = relationship(
        "Invoice",
        back_populates="company",
        cascade="all, delete",
        order_by="Invoice.id",
    )

    # Relationship: one-to-many (companies → join rows), insertion order
    industry_links = relationship(
        "CompanyIndustry",
        back_populates="company",
        cascade="all, delete",
        order_by="CompanyIndustry.id",
    )
