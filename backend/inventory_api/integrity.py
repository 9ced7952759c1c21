# inventory_api/integrity.py
from typing import Any

from sqlalchemy.orm import Session

from . import queries
from .database import fetch_all
from .errors import InvalidReferenceError, ValidationError
from .utils import is_empty


def ensure_product_type_exists(db: Session, product_type_id: Any) -> None:
    """Raise unless ``product_type_id`` names an existing product type.

    The lookup and the caller's following write are separate statements, so a
    type deleted in between still leaves a dangling reference.
    """
    if is_empty(product_type_id):
        raise ValidationError("productTypeID is required")
    if not fetch_all(db, queries.product_type_exists(product_type_id)):
        raise InvalidReferenceError("Invalid productTypeID")
