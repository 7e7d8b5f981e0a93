"""Health check endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from snippetbox.config import get_settings
from snippetbox.database import get_db

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(db: Annotated[Session, Depends(get_db)]):
    """Report healthy once the database answers."""
    db.execute(text("SELECT 1"))
    return {"status": "healthy", "environment": get_settings().environment}
