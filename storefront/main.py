"""
FastAPI Application Entry Point - Storefront API
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from prometheus_fastapi_instrumentator import Instrumentator

from storefront import __version__
from storefront.api import auth, categories, products, orders, upload, health
from storefront.config import Settings
from storefront.database import create_db_engine, create_session_factory, init_db
from storefront.errors import register_error_handlers
from storefront.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application
    
    Settings are read from the environment when not given; a missing
    DATABASE_URL or JWT_SECRET aborts startup.
    """
    if settings is None:
        settings = Settings()
    setup_logging(settings.LOG_LEVEL)
    
    engine = create_db_engine(settings.DATABASE_URL)
    
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s...", settings.SERVICE_NAME)
        init_db(engine)
        logger.info("Database initialized")
        logger.info("%s is running on port %s", settings.SERVICE_NAME, settings.SERVICE_PORT)
        yield
        logger.info("Shutting down %s...", settings.SERVICE_NAME)
        engine.dispose()
    
    app = FastAPI(
        title="Storefront API",
        description="Catalog, authentication and order processing for the storefront",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_error_handlers(app)
    
    # Include routers
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(categories.router)
    app.include_router(products.router)
    app.include_router(orders.router)
    app.include_router(upload.router)
    
    # Uploaded images
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")
    
    # Prometheus metrics
    if settings.ENABLE_METRICS:
        Instrumentator().instrument(app).expose(app)
    
    return app
