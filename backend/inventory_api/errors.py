# inventory_api/errors.py
from contextlib import contextmanager
from typing import Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError


class ApiError(Exception):
    """Base class for errors that map onto a failure envelope."""

    status_code = 500

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class ValidationError(ApiError):
    status_code = 400


class InvalidReferenceError(ApiError):
    """A foreign key value points at a row that does not exist."""

    status_code = 400


class ConflictError(ApiError):
    status_code = 400


class NotFoundError(ApiError):
    status_code = 404


class StoreError(ApiError):
    """The store rejected or failed a statement. ``detail`` is server-side only
    unless running in development."""

    status_code = 500


@contextmanager
def store_errors(message: str):
    """Turn any SQLAlchemy failure inside the block into a StoreError."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.opt(exception=e).error("{}: {}", message, e)
        raise StoreError(message, detail=str(e)) from e
