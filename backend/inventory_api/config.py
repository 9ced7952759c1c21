# inventory_api/config.py
import os

from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./inventory.db")

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3000"))

# NODE_ENV is still honoured so existing deployment files keep working
ENVIRONMENT = os.environ.get("ENVIRONMENT", os.environ.get("NODE_ENV", "production"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

LOW_STOCK_THRESHOLD = int(os.environ.get("LOW_STOCK_THRESHOLD", "10"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "CORS_ORIGINS",
        "http://localhost:3000,http://localhost:3001,http://localhost:5173",
    ).split(",")
    if origin.strip()
]


def is_development() -> bool:
    return ENVIRONMENT.lower() == "development"
