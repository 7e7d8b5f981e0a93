"""Snippet data access."""

from datetime import timedelta

from sqlalchemy.orm import Session

from snippetbox.models.mixins import utcnow
from snippetbox.models.snippet import Snippet
from snippetbox.services.errors import NoRecordError

LATEST_LIMIT = 10


class SnippetService:
    """Create and read snippets. Only unexpired snippets are ever returned."""

    def __init__(self, db: Session):
        self.db = db

    def insert(self, title: str, content: str, days: int) -> int:
        """Store a new snippet that expires `days` from now and return its id.

        `days` is expected to have been validated by the caller.
        """
        now = utcnow()
        snippet = Snippet(
            title=title,
            content=content,
            created=now,
            expires=now + timedelta(days=days),
        )
        self.db.add(snippet)
        self.db.commit()
        self.db.refresh(snippet)
        return snippet.id

    def get(self, snippet_id: int) -> Snippet:
        """Fetch a visible snippet by id.

        Raises:
            NoRecordError: the id is unknown or the snippet has expired.
        """
        snippet = (
            self.db.query(Snippet)
            .filter(Snippet.id == snippet_id, Snippet.expires > utcnow())
            .first()
        )
        if snippet is None:
            raise NoRecordError()
        return snippet

    def latest(self) -> list[Snippet]:
        """Return up to ten visible snippets, newest id first."""
        return (
            self.db.query(Snippet)
            .filter(Snippet.expires > utcnow())
            .order_by(Snippet.id.desc())
            .limit(LATEST_LIMIT)
            .all()
        )
