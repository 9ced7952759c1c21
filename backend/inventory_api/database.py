# inventory_api/database.py
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from loguru import logger
from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from . import config


def _connect_args(url: str) -> dict:
    # sqlite connections are shared with the threadpool FastAPI runs sync routes on
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    config.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=_connect_args(config.DATABASE_URL),
)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@dataclass
class WriteResult:
    affected_rows: int
    insert_id: Optional[Any] = None


def fetch_all(db: Session, statement) -> List[Dict[str, Any]]:
    """Run a read statement and return every row as a plain dict."""
    result = db.execute(statement)
    return [dict(row._mapping) for row in result]


def fetch_one(db: Session, statement) -> Optional[Dict[str, Any]]:
    rows = fetch_all(db, statement)
    return rows[0] if rows else None


def execute_write(db: Session, statement) -> WriteResult:
    """Run a single INSERT/UPDATE/DELETE and commit it on its own.

    ``insert_id`` is only filled for inserts, where the dialect reports the
    generated primary key (RETURNING on PostgreSQL, lastrowid elsewhere).
    """
    result = db.execute(statement)
    insert_id = None
    if result.is_insert and result.inserted_primary_key:
        insert_id = result.inserted_primary_key[0]
    db.commit()
    return WriteResult(affected_rows=result.rowcount, insert_id=insert_id)


def test_connection(bind=None) -> bool:
    """Probe the store with ``SELECT 1``; never raises."""
    try:
        with (bind or engine).connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error("Database connection failed: {}", e)
        return False
