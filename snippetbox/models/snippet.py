"""Snippet model."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from snippetbox.database import Base
from snippetbox.models.mixins import CreatedMixin


class Snippet(Base, CreatedMixin):
    """A piece of text that stays visible until it expires."""

    __tablename__ = "snippets"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(100), nullable=False)
    content = Column(Text, nullable=False)
    expires = Column(DateTime(timezone=True), nullable=False, index=True)
