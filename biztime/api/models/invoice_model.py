from datetime import date

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    Float,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import relationship
from biztime.api.core.db import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, autoincrement=True)

    comp_code = Column(
        String,
        ForeignKey("companies.code", ondelete="CASCADE"),
        nullable=False,
    )
    amt = Column(Float, nullable=False)

    # --- Payment state ---
    paid = Column(Boolean, nullable=False, default=False)
    add_date = Column(Date, nullable=False, default=date.today)
    paid_date = Column(Date, nullable=True)   # set when paid flips to true

    # Relationship back to the company
    company = relationship("Company", back_populates="invoices")
