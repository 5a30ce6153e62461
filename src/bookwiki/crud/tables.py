"""Database table definitions for articles"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import Column, DateTime, JSON, Text
from sqlmodel import Field, SQLModel


class ArticleRow(SQLModel, table=True):
    """Snapshot of one article; blocks and tags are stored as JSON."""
    __tablename__ = "articles"
    id: str = Field(primary_key=True)
    title: str = Field(..., sa_column=Column(Text, nullable=False))
    category_id: Optional[str] = Field(default=None, index=True)
    tags: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    blocks: list[dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    last_modified: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
