# inventory_api/queries.py
"""SQL statement builders.

Every value is passed as a bound parameter. For the generic endpoints the
table and column names are wrapped in ``quoted_name(..., quote=True)`` so the
dialect always emits them as escaped, quoted identifiers instead of raw text.
"""
from typing import Any, Dict

from sqlalchemy import column, delete, func, insert, literal_column, select, table, update
from sqlalchemy.sql.elements import quoted_name

from . import models
from .errors import ValidationError

product = models.Product.__table__
product_type = models.ProductType.__table__

UPDATABLE_PRODUCT_FIELDS = (
    "productName",
    "totalCost",
    "salePrice",
    "stockAmount",
    "productTypeID",
)


def contains_pattern(value: str) -> str:
    return f"%{value}%"


def identifier(name: str) -> quoted_name:
    return quoted_name(name, quote=True)


# ---- product types ----
def list_product_types():
    return select(product_type).order_by(product_type.c.productTypeID)


def get_product_type(type_id: int):
    return select(product_type).where(product_type.c.productTypeID == type_id)


def product_type_exists(type_id: Any):
    return select(product_type.c.productTypeID).where(
        product_type.c.productTypeID == type_id
    )


def insert_product_type(label: str):
    return insert(product_type).values(productType=label)


def update_product_type(type_id: int, label: str):
    return (
        update(product_type)
        .where(product_type.c.productTypeID == type_id)
        .values(productType=label)
    )


def count_products_with_type(type_id: int):
    return (
        select(func.count().label("count"))
        .select_from(product)
        .where(product.c.productTypeID == type_id)
    )


def delete_product_type(type_id: int):
    return delete(product_type).where(product_type.c.productTypeID == type_id)


# ---- products ----
def _product_select():
    return select(
        product.c.productID,
        product.c.productName,
        product.c.totalCost,
        product.c.salePrice,
        product.c.stockAmount,
        product.c.productTypeID,
        product_type.c.productType,
    ).select_from(
        product.outerjoin(
            product_type, product.c.productTypeID == product_type.c.productTypeID
        )
    )


def list_products():
    return _product_select().order_by(product.c.productID)


def get_product(product_id: int):
    return _product_select().where(product.c.productID == product_id)


def search_products(name: str):
    return (
        _product_select()
        .where(product.c.productName.like(contains_pattern(name)))
        .order_by(product.c.productName)
    )


def products_by_type(type_id: Any):
    return (
        _product_select()
        .where(product.c.productTypeID == type_id)
        .order_by(product.c.productName)
    )


def low_stock_products(threshold: Any):
    return (
        _product_select()
        .where(product.c.stockAmount <= threshold)
        .order_by(product.c.stockAmount.asc(), product.c.productName)
    )


def insert_product(
    productName: str,
    totalCost=0,
    salePrice=0,
    stockAmount=0,
    productTypeID=None,
):
    return insert(product).values(
        productName=productName,
        totalCost=totalCost,
        salePrice=salePrice,
        stockAmount=stockAmount,
        productTypeID=productTypeID,
    )


def update_product(product_id: int, fields: Dict[str, Any]):
    """Build an UPDATE carrying a SET clause only for the given fields."""
    assignments = {k: v for k, v in fields.items() if k in UPDATABLE_PRODUCT_FIELDS}
    if not assignments:
        raise ValidationError("No fields to update")
    return update(product).where(product.c.productID == product_id).values(**assignments)


def update_product_type_id(product_id: int, type_id: int):
    return (
        update(product)
        .where(product.c.productID == product_id)
        .values(productTypeID=type_id)
    )


def delete_product(product_id: int):
    return delete(product).where(product.c.productID == product_id)


# ---- generic tables ----
def generic_list(table_name: str):
    return select(literal_column("*")).select_from(table(identifier(table_name)))


def generic_get(table_name: str, record_id: Any):
    return generic_list(table_name).where(column(identifier("id")) == record_id)


def generic_search(table_name: str, field: str, value: str):
    return generic_list(table_name).where(
        column(identifier(field)).like(contains_pattern(value))
    )
