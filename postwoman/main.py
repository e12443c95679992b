"""
Postwoman - FastAPI Application Entry Point

Local backend for a Postman-style REST client: saved requests organized in
folders, request execution with history, code generation and collection
import/export.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ORIGINS, LOG_LEVEL
from .database import init_db
from .exceptions import register_exception_handlers
from .routers import execute, folders, history, requests, tools

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    init_db()
    log.info("database initialised")
    yield


app = FastAPI(
    title="Postwoman",
    description="A Postman-style REST client backend",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/")
async def root():
    """Root endpoint returning API information."""
    return {
        "name": "Postwoman",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(folders.router)
app.include_router(requests.router)
app.include_router(execute.router)
app.include_router(history.router)
app.include_router(tools.router)
