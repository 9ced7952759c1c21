# inventory_api/models.py
from sqlalchemy import Column, Integer, String, Numeric

from .database import Base


class ProductType(Base):
    __tablename__ = "productType"
    productTypeID = Column(Integer, primary_key=True, autoincrement=True)
    productType = Column(String(255), nullable=False)


class Product(Base):
    __tablename__ = "product"
    productID = Column(Integer, primary_key=True, autoincrement=True)
    productName = Column(String(255), nullable=False)
    totalCost = Column(Numeric(10, 2, asdecimal=False), nullable=False, default=0)
    salePrice = Column(Numeric(10, 2, asdecimal=False), nullable=False, default=0)
    stockAmount = Column(Integer, nullable=False, default=0)
    # No ForeignKey: existence is checked by integrity.ensure_product_type_exists
    productTypeID = Column(Integer, nullable=False, index=True)
