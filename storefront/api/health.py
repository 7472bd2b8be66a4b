"""
Liveness and service info endpoints
"""
import os
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from storefront import __version__
from storefront.api.deps import get_settings
from storefront.config import Settings
from storefront.database import get_db

router = APIRouter(tags=["health"])


def _database_status(db: Session) -> str:
    try:
        db.execute(text("SELECT 1"))
    except Exception as e:
        return f"unhealthy: {e.__class__.__name__}"
    return "healthy"


def _uploads_status(upload_dir: str) -> str:
    if not os.path.isdir(upload_dir):
        return "missing"
    if not os.access(upload_dir, os.W_OK):
        return "read-only"
    return "writable"


@router.get("/health")
def health_check(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Report whether the storefront can serve requests

    The service is healthy when the database answers and image uploads
    can be written.
    """
    database = _database_status(db)
    uploads = _uploads_status(settings.UPLOAD_DIR)
    healthy = database == "healthy" and uploads == "writable"

    return {
        "service": settings.SERVICE_NAME,
        "version": __version__,
        "status": "healthy" if healthy else "unhealthy",
        "database": database,
        "uploads": uploads,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/")
def root(settings: Settings = Depends(get_settings)):
    """Service name, version and docs location"""
    return {
        "service": settings.SERVICE_NAME,
        "version": __version__,
        "docs": "/docs"
    }
