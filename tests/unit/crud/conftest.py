"""Shared fixtures for crud unit tests"""

import pytest
from sqlalchemy import create_engine
from sqlmodel import SQLModel, Session

from bookwiki.core.models import Article, HeadingBlock, InfoboxBlock, ParagraphBlock
from bookwiki.crud.tables import ArticleRow  # noqa: F401


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite engine with all tables created."""
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False})
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture(name="article")
def article_fixture():
    """An article with one block of each type."""
    return Article(
        title="Огаро",
        category_id="characters",
        tags=["ГГ", "Профиль"],
        blocks=[
            HeadingBlock(text="Введение"),
            ParagraphBlock(text="Текст *курсивом*."),
            InfoboxBlock(entries=[("Имя", "Огаро"), ("Статус", "Жив")]),
        ],
    )
