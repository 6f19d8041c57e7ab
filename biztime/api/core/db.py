from contextlib import contextmanager

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from biztime.api.core.config import settings
from biztime.api.core.logging import get_logger

logger = get_logger(__name__)

# ----------------------------------------------------
# 1. ENGINE
# ----------------------------------------------------
DATABASE_URL = settings.database_url

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}


def enable_sqlite_foreign_keys(target: Engine) -> None:
    """SQLite ignores FOREIGN KEY constraints unless asked per connection."""

    @event.listens_for(target, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_engine(DATABASE_URL, connect_args=connect_args)
if engine.dialect.name == "sqlite":
    enable_sqlite_foreign_keys(engine)

# ----------------------------------------------------
# 2. SESSION FACTORY
# ----------------------------------------------------
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ----------------------------------------------------
# 3. BASE CLASS FOR ALL MODELS
# ----------------------------------------------------
Base = declarative_base()


# ----------------------------------------------------
# 4. DEPENDENCY FOR FASTAPI
# ----------------------------------------------------
def get_db():
    """
    FastAPI dependency — yields a DB session.
    Tests replace it through app.dependency_overrides.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ----------------------------------------------------
# 5. TRANSACTION SCOPE
# ----------------------------------------------------
@contextmanager
def transaction(db: Session):
    """
    Commit everything done inside the block, or roll all of it back.

    Used for every mutation, including check-then-insert sequences, so a
    failure between the two statements leaves nothing behind.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


# ----------------------------------------------------
# 6. STARTUP SCHEMA CREATION
# ----------------------------------------------------
def table_exists(table_name: str) -> bool:
    inspector = inspect(engine)
    return table_name in inspector.get_table_names()


def run_migrations():
    """
    Creates any missing tables at startup.

    Column-level changes go through the Alembic revisions in
    biztime/api/migrations.
    """
    from biztime.api.models import company_model, industry_model, invoice_model  # noqa: F401

    missing = [
        name for name in Base.metadata.tables if not table_exists(name)
    ]
    if not missing:
        logger.info("Database schema up to date")
        return

    logger.info("Creating tables: %s", ", ".join(missing))
    Base.metadata.create_all(bind=engine)
