# inventory_api/schemas.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Any


class ProductTypeIn(BaseModel):
    productType: Optional[str] = None


class ProductFields(BaseModel):
    productName: Optional[str] = None
    totalCost: Optional[float] = Field(None, ge=0)
    salePrice: Optional[float] = Field(None, ge=0)
    stockAmount: Optional[int] = Field(None, ge=0)
    productTypeID: Optional[int] = None


class ProductCreate(ProductFields):
    pass


class ProductUpdate(ProductFields):
    """Only the fields present in the request body (``model_fields_set``) are
    written; absent fields keep their stored value."""


class ProductTypeAssignment(BaseModel):
    productTypeID: Optional[int] = None


class Envelope(BaseModel):
    # affectedRows / insertId / threshold ride along as extra keys
    model_config = ConfigDict(extra="allow")

    success: bool
    data: Optional[Any] = None
    count: Optional[int] = None
    message: Optional[str] = None
    error: Optional[str] = None
