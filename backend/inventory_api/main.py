# inventory_api/main.py
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import config, crud, database, models, schemas, utils
from .database import get_db
from .errors import ApiError, StoreError, store_errors
from .logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    if database.test_connection():
        try:
            models.Base.metadata.create_all(bind=database.engine)
        except SQLAlchemyError as e:
            logger.error("Could not create tables: {}", e)
    else:
        logger.warning("Starting server without database connection")
    logger.info("API available at http://{}:{}", config.HOST, config.PORT)
    logger.info("Health check: http://{}:{}/health", config.HOST, config.PORT)
    yield


app = FastAPI(title="Inventory API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -------------------- ERROR HANDLING --------------------
@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    error = exc.detail if config.is_development() else None
    if isinstance(exc, StoreError) and error is None:
        error = "Something went wrong"
    return JSONResponse(status_code=exc.status_code, content=utils.fail(exc.message, error))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return JSONResponse(status_code=400, content=utils.fail("Invalid request", problems))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content=utils.fail("Endpoint not found"))
    return JSONResponse(status_code=exc.status_code, content=utils.fail(str(exc.detail)))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    error = str(exc) if config.is_development() else "Something went wrong"
    return JSONResponse(status_code=500, content=utils.fail("Internal server error", error))


# -------------------- SERVICE --------------------
@app.get("/")
def index():
    return {
        "message": "Inventory API is running!",
        "status": "success",
        "timestamp": utils.utc_timestamp(),
    }


@app.get("/health")
def health(db: Session = Depends(get_db)):
    connected = database.test_connection(db.get_bind())
    return {
        "status": "ok",
        "database": "connected" if connected else "disconnected",
        "timestamp": utils.utc_timestamp(),
    }


# -------------------- PRODUCT TYPES --------------------
@app.get("/api/product-types")
def list_product_types(db: Session = Depends(get_db)):
    with store_errors("Error fetching product types"):
        rows = crud.list_product_types(db)
    return utils.ok(rows, collection=True)


@app.get("/api/product-types/{type_id}")
def get_product_type(type_id: str, db: Session = Depends(get_db)):
    with store_errors("Error fetching product type"):
        row = crud.get_product_type(db, type_id)
    return utils.ok(row)


@app.post("/api/product-types", status_code=201)
def create_product_type(payload: schemas.ProductTypeIn, db: Session = Depends(get_db)):
    with store_errors("Error creating product type"):
        result = crud.create_product_type(db, payload)
    return utils.ok(
        {"productType": payload.productType},
        message="Product type created successfully",
        insertId=result.insert_id,
    )


@app.put("/api/product-types/{type_id}")
def update_product_type(
    type_id: str, payload: schemas.ProductTypeIn, db: Session = Depends(get_db)
):
    with store_errors("Error updating product type"):
        result = crud.update_product_type(db, type_id, payload)
    return utils.ok(
        message="Product type updated successfully", affectedRows=result.affected_rows
    )


@app.delete("/api/product-types/{type_id}")
def delete_product_type(type_id: str, db: Session = Depends(get_db)):
    with store_errors("Error deleting product type"):
        result = crud.delete_product_type(db, type_id)
    return utils.ok(
        message="Product type deleted successfully", affectedRows=result.affected_rows
    )


# -------------------- PRODUCTS --------------------
@app.get("/api/products")
def list_products(db: Session = Depends(get_db)):
    with store_errors("Error fetching products"):
        rows = crud.list_products(db)
    return utils.ok(rows, collection=True)


@app.get("/api/products/search/{name}")
def search_products(name: str, db: Session = Depends(get_db)):
    with store_errors("Error searching products"):
        rows = crud.search_products(db, name)
    return utils.ok(rows, collection=True)


@app.get("/api/products/by-type/{type_id}")
def list_products_by_type(type_id: str, db: Session = Depends(get_db)):
    with store_errors("Error fetching products by type"):
        rows = crud.list_products_by_type(db, type_id)
    return utils.ok(rows, collection=True)


@app.get("/api/products/low-stock")
@app.get("/api/products/low-stock/{threshold}")
def list_low_stock_products(threshold: Optional[str] = None, db: Session = Depends(get_db)):
    if utils.is_empty(threshold):
        threshold = str(config.LOW_STOCK_THRESHOLD)
    with store_errors("Error fetching low stock products"):
        rows = crud.list_low_stock_products(db, threshold)
    return utils.ok(rows, collection=True, threshold=utils.parse_int(threshold))


@app.get("/api/products/{product_id}")
def get_product(product_id: str, db: Session = Depends(get_db)):
    with store_errors("Error fetching product"):
        row = crud.get_product(db, product_id)
    return utils.ok(row)


@app.post("/api/products", status_code=201)
def create_product(payload: schemas.ProductCreate, db: Session = Depends(get_db)):
    with store_errors("Error creating product"):
        result = crud.create_product(db, payload)
    return utils.ok(message="Product created successfully", insertId=result.insert_id)


@app.put("/api/products/{product_id}")
def update_product(
    product_id: str, payload: schemas.ProductUpdate, db: Session = Depends(get_db)
):
    with store_errors("Error updating product"):
        result = crud.update_product(db, product_id, payload)
    return utils.ok(message="Product updated successfully", affectedRows=result.affected_rows)


@app.put("/api/products/{product_id}/typeID")
def update_product_type_id(
    product_id: str, payload: schemas.ProductTypeAssignment, db: Session = Depends(get_db)
):
    with store_errors("Error updating product type"):
        result = crud.update_product_type_id(db, product_id, payload)
    return utils.ok(
        message="Product type updated successfully", affectedRows=result.affected_rows
    )


@app.delete("/api/products/{product_id}")
def delete_product(product_id: str, db: Session = Depends(get_db)):
    with store_errors("Error deleting product"):
        result = crud.delete_product(db, product_id)
    return utils.ok(message="Product deleted successfully", affectedRows=result.affected_rows)


# -------------------- GENERIC TABLES --------------------
@app.get("/api/generic/{table}")
def generic_list(table: str, db: Session = Depends(get_db)):
    with store_errors("Error fetching data"):
        rows = crud.generic_list(db, table)
    return utils.ok(rows, collection=True)


@app.get("/api/generic/{table}/search/{field}/{value}")
def generic_search(table: str, field: str, value: str, db: Session = Depends(get_db)):
    with store_errors("Error searching records"):
        rows = crud.generic_search(db, table, field, value)
    return utils.ok(rows, collection=True)


@app.get("/api/generic/{table}/{record_id}")
def generic_get(table: str, record_id: str, db: Session = Depends(get_db)):
    with store_errors("Error fetching record"):
        row = crud.generic_get(db, table, record_id)
    return utils.ok(row)


def run():
    uvicorn.run("inventory_api.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
