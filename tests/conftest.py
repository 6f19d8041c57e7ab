"""
Pytest configuration for BizTime tests.

Every test gets a fresh in-memory SQLite database seeded with one company,
one invoice and two industries linked to that company.
"""
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ["ENVIRONMENT"] = "test"

from biztime.api.core.db import Base, get_db
from biztime.api.main import app
from biztime.api.models.company_model import Company
from biztime.api.models.industry_model import CompanyIndustry, Industry
from biztime.api.models.invoice_model import Invoice


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    session.add(Company(code="apple", name="Apple", description="Maker of OSX"))
    session.add_all([
        Industry(industry="tech", description="produces and manufactures technology"),
        Industry(industry="famous", description="well known brand"),
    ])
    session.flush()
    session.add(Invoice(comp_code="apple", amt=100))
    session.add(CompanyIndustry(company_id="apple", industry_id="tech"))
    session.flush()
    session.add(CompanyIndustry(company_id="apple", industry_id="famous"))
    session.commit()

    yield session
    session.close()


@pytest.fixture
def client(db):
    """Test client whose routes use the seeded session."""

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def invoice_id(db):
    return db.query(Invoice).first().id
