"""FastAPI dependencies for data access."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from snippetbox.database import get_db
from snippetbox.services.snippet_service import SnippetService
from snippetbox.services.user_service import UserService


def get_snippet_service(
    db: Annotated[Session, Depends(get_db)],
) -> SnippetService:
    """Get snippet service bound to the request's session."""
    return SnippetService(db)


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service bound to the request's session."""
    return UserService(db)
