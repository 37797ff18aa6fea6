import logging
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import SQLModel, create_engine, Session
from .settings import settings

logger = logging.getLogger(__name__)

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"

# check_same_thread=False is needed only for SQLite
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)


class StoreError(Exception):
    """Any failure reported by the persistence layer."""


class RecordNotFoundError(StoreError):
    """The statement matched no rows."""


class UniqueViolationError(StoreError):
    """The statement violated a uniqueness constraint."""


def create_db_and_tables():
    url = make_url(settings.DATABASE_URL)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session


def is_unique_violation(error: IntegrityError) -> bool:
    orig = error.orig
    if getattr(orig, "pgcode", None) == UNIQUE_VIOLATION or getattr(orig, "sqlstate", None) == UNIQUE_VIOLATION:
        return True
    return "UNIQUE constraint failed" in str(orig)


def commit(session: Session, *instances):
    """
    Adds the given rows, commits and refreshes them.
    Driver errors are translated into the tagged StoreError family.
    """
    try:
        for instance in instances:
            session.add(instance)
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if is_unique_violation(e):
            raise UniqueViolationError(str(e.orig)) from e
        logger.error("Integrity error on commit: %s", e.orig)
        raise StoreError(str(e.orig)) from e
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Database error on commit: %s", e)
        raise StoreError(str(e)) from e

    for instance in instances:
        session.refresh(instance)


def delete(session: Session, instance):
    try:
        session.delete(instance)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Database error on delete: %s", e)
        raise StoreError(str(e)) from e


def fetch_all(session: Session, statement) -> list:
    try:
        return list(session.exec(statement).all())
    except SQLAlchemyError as e:
        logger.error("Database error on select: %s", e)
        raise StoreError(str(e)) from e


def fetch_one(session: Session, statement):
    """Returns the first row of the statement or raises RecordNotFoundError."""
    try:
        row = session.exec(statement).first()
    except SQLAlchemyError as e:
        logger.error("Database error on select: %s", e)
        raise StoreError(str(e)) from e
    if row is None:
        raise RecordNotFoundError("no rows in result set")
    return row
