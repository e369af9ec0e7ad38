"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Must run before importing modules that read env vars at import time
load_dotenv()

# main.py is at src/api/main.py; modules are imported relative to src
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.errors import register_exception_handlers
from api.routes import health, users
from utils.logging import setup_structured_logging
from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.indexes import ensure_all_indexes

setup_structured_logging()

logger = logging.getLogger(__name__)

# Version lives in pyproject.toml
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "CampusCoffee Users API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: ensure MongoDB indexes on startup."""
    client = get_mongodb_client()
    if client:
        if ensure_all_indexes(client[DATABASE_NAME]):
            logger.info("MongoDB indexes verified/created successfully")
        else:
            logger.warning("Failed to create some MongoDB indexes")
    else:
        logger.warning("MongoDB unavailable, skipping index creation")

    yield


app = FastAPI(
    title=SERVICE_NAME,
    description="User management API for CampusCoffee",
    version=VERSION,
    lifespan=lifespan,
)

# Browsers reject credentials with a wildcard origin
cors_origins_env = os.getenv("CORS_ORIGINS", "*")
if cors_origins_env == "*":
    cors_origins = ["*"]
    allow_credentials = False
else:
    cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]
    allow_credentials = True
    logger.info(f"CORS configured with specific origins: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(health.router)
app.include_router(users.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    # Application logs already go through structured logging
    uvicorn.run(app, host="0.0.0.0", port=port, access_log=False)
