"""Article and content block models"""

from datetime import datetime
from typing import Annotated, Literal, Optional, Union
from uuid import uuid4

from pydantic import BaseModel, Field


def generate_id() -> str:
    """Return a fresh, unique block/article identifier."""
    return uuid4().hex


class HeadingBlock(BaseModel):
    """A single-line section heading. Level is not modelled; headings render as h2."""
    type: Literal["heading"] = "heading"
    id: str = Field(default_factory=generate_id)
    text: str


class ParagraphBlock(BaseModel):
    """Free-form markdown text (lists, quotes, emphasis stay inline)."""
    type: Literal["paragraph"] = "paragraph"
    id: str = Field(default_factory=generate_id)
    text: str


class InfoboxBlock(BaseModel):
    """Ordered key/value table. Entry order is display order; duplicate keys are kept."""
    type: Literal["infobox"] = "infobox"
    id: str = Field(default_factory=generate_id)
    entries: list[tuple[str, str]] = Field(default_factory=list)


ContentBlock = Annotated[
    Union[HeadingBlock, ParagraphBlock, InfoboxBlock],
    Field(discriminator="type"),
]


class Article(BaseModel):
    """An article owns its blocks; they are replaced wholesale on every save."""
    id: str = Field(default_factory=generate_id)
    title: str
    category_id: Optional[str] = None
    tags: list[str] = Field(default_factory=list)    # not deduplicated
    blocks: list[ContentBlock] = Field(default_factory=list)
    last_modified: datetime = Field(default_factory=datetime.now)
