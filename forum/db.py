# =============================================================================
# File: forum/db.py
# Purpose: SQLAlchemy engine + per-app session factory.
# =============================================================================
from flask import current_app
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for ORM models."""
    pass


def init_db(database_url: str) -> tuple[Engine, sessionmaker]:
    """Create an engine, its missing tables and a session factory bound to it."""
    # Import models so metadata sees them before create_all
    from . import models  # noqa: F401

    engine = create_engine(database_url, echo=False, future=True)
    Base.metadata.create_all(engine)
    return engine, sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def db_session() -> Session:
    """New ORM session on the current app's database."""
    return current_app.extensions["forum.db"]()
