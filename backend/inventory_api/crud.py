# inventory_api/crud.py
from typing import Any, Dict, List

from loguru import logger
from sqlalchemy import inspect
from sqlalchemy.exc import NoSuchColumnError, NoSuchTableError
from sqlalchemy.orm import Session

from . import queries, schemas
from .database import WriteResult, execute_write, fetch_all, fetch_one
from .errors import ConflictError, NotFoundError, ValidationError
from .integrity import ensure_product_type_exists
from .utils import is_empty, parse_id, parse_int

PRODUCT_TYPE_NOT_FOUND = "Product type not found"
PRODUCT_NOT_FOUND = "Product not found"


def _require_affected(result: WriteResult, message: str) -> WriteResult:
    if result.affected_rows == 0:
        raise NotFoundError(message)
    return result


# -------------------- PRODUCT TYPES --------------------
def list_product_types(db: Session) -> List[Dict[str, Any]]:
    return fetch_all(db, queries.list_product_types())


def get_product_type(db: Session, type_id: str) -> Dict[str, Any]:
    row = fetch_one(db, queries.get_product_type(parse_id(type_id, PRODUCT_TYPE_NOT_FOUND)))
    if row is None:
        raise NotFoundError(PRODUCT_TYPE_NOT_FOUND)
    return row


def create_product_type(db: Session, payload: schemas.ProductTypeIn) -> WriteResult:
    if is_empty(payload.productType):
        raise ValidationError("productType is required")
    result = execute_write(db, queries.insert_product_type(payload.productType))
    logger.info("Created product type {} ({})", result.insert_id, payload.productType)
    return result


def update_product_type(db: Session, type_id: str, payload: schemas.ProductTypeIn) -> WriteResult:
    if is_empty(payload.productType):
        raise ValidationError("productType is required")
    type_id = parse_id(type_id, PRODUCT_TYPE_NOT_FOUND)
    result = execute_write(db, queries.update_product_type(type_id, payload.productType))
    return _require_affected(result, PRODUCT_TYPE_NOT_FOUND)


def delete_product_type(db: Session, type_id: str) -> WriteResult:
    """Delete a product type that no product references.

    The dependency count and the delete are two statements; a product inserted
    between them is not seen.
    """
    type_id = parse_id(type_id, PRODUCT_TYPE_NOT_FOUND)
    dependents = fetch_one(db, queries.count_products_with_type(type_id))
    if dependents["count"] > 0:
        raise ConflictError("Cannot delete product type. There are products using this type.")
    result = execute_write(db, queries.delete_product_type(type_id))
    _require_affected(result, PRODUCT_TYPE_NOT_FOUND)
    logger.info("Deleted product type {}", type_id)
    return result


# -------------------- PRODUCTS --------------------
def list_products(db: Session) -> List[Dict[str, Any]]:
    return fetch_all(db, queries.list_products())


def get_product(db: Session, product_id: str) -> Dict[str, Any]:
    row = fetch_one(db, queries.get_product(parse_id(product_id, PRODUCT_NOT_FOUND)))
    if row is None:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return row


def create_product(db: Session, p: schemas.ProductCreate) -> WriteResult:
    if is_empty(p.productName) or is_empty(p.productTypeID):
        raise ValidationError("productName and productTypeID are required")

    ensure_product_type_exists(db, p.productTypeID)

    result = execute_write(
        db,
        queries.insert_product(
            productName=p.productName,
            totalCost=p.totalCost or 0,
            salePrice=p.salePrice or 0,
            stockAmount=p.stockAmount or 0,
            productTypeID=p.productTypeID,
        ),
    )
    logger.info("Created product {} ({})", result.insert_id, p.productName)
    return result


def update_product(db: Session, product_id: str, p: schemas.ProductUpdate) -> WriteResult:
    fields = {
        name: getattr(p, name)
        for name in queries.UPDATABLE_PRODUCT_FIELDS
        if name in p.model_fields_set
    }
    empty = [name for name, value in fields.items() if is_empty(value)]
    if empty:
        raise ValidationError(f"{', '.join(empty)} cannot be empty")

    product_id = parse_id(product_id, PRODUCT_NOT_FOUND)
    statement = queries.update_product(product_id, fields)

    if "productTypeID" in fields:
        ensure_product_type_exists(db, fields["productTypeID"])

    result = execute_write(db, statement)
    return _require_affected(result, PRODUCT_NOT_FOUND)


def update_product_type_id(
    db: Session, product_id: str, payload: schemas.ProductTypeAssignment
) -> WriteResult:
    logger.info("Updating product {} with typeID {}", product_id, payload.productTypeID)
    ensure_product_type_exists(db, payload.productTypeID)
    result = execute_write(
        db,
        queries.update_product_type_id(
            parse_id(product_id, PRODUCT_NOT_FOUND), payload.productTypeID
        ),
    )
    return _require_affected(result, PRODUCT_NOT_FOUND)


def delete_product(db: Session, product_id: str) -> WriteResult:
    product_id = parse_id(product_id, PRODUCT_NOT_FOUND)
    result = execute_write(db, queries.delete_product(product_id))
    _require_affected(result, PRODUCT_NOT_FOUND)
    logger.info("Deleted product {}", product_id)
    return result


def search_products(db: Session, name: str) -> List[Dict[str, Any]]:
    return fetch_all(db, queries.search_products(name))


def list_products_by_type(db: Session, type_id: str) -> List[Dict[str, Any]]:
    parsed = parse_int(type_id)
    if parsed is None:
        return []
    return fetch_all(db, queries.products_by_type(parsed))


def list_low_stock_products(db: Session, threshold: Any) -> List[Dict[str, Any]]:
    limit = parse_int(threshold)
    if limit is None:
        raise ValidationError("threshold must be an integer")
    return fetch_all(db, queries.low_stock_products(limit))


# -------------------- GENERIC TABLES --------------------
def _check_identifiers(db: Session, table: str, *columns: str) -> None:
    """Reject names the store does not know before they reach a statement.

    SQLite reads an unknown double-quoted column as a string literal, so
    quoting alone does not turn a bad column into an error there.
    """
    inspector = inspect(db.get_bind())
    if not inspector.has_table(table):
        raise NoSuchTableError(table)
    known = {col["name"] for col in inspector.get_columns(table)}
    for name in columns:
        if name not in known:
            raise NoSuchColumnError(f"{table}.{name}")


def generic_list(db: Session, table: str) -> List[Dict[str, Any]]:
    _check_identifiers(db, table)
    return fetch_all(db, queries.generic_list(table))


def generic_get(db: Session, table: str, record_id: str) -> Dict[str, Any]:
    _check_identifiers(db, table, "id")
    row = fetch_one(db, queries.generic_get(table, record_id))
    if row is None:
        raise NotFoundError("Record not found")
    return row


def generic_search(db: Session, table: str, field: str, value: str) -> List[Dict[str, Any]]:
    _check_identifiers(db, table, field)
    return fetch_all(db, queries.generic_search(table, field, value))
