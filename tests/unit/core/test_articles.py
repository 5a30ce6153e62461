"""Unit tests for core/articles.py"""

from datetime import datetime, timedelta

import pytest

from bookwiki.core.articles import (
    DEFAULT_HEADING, DEFAULT_PARAGRAPH,
    create_article, delete_article, load_for_editing, new_article, save_from_markdown,
)
from bookwiki.core.models import InfoboxBlock
from bookwiki.crud.memory_store import MemoryStore


@pytest.fixture(name="store")
def store_fixture():
    return MemoryStore()


def test_new_article_seed_blocks():
    """New articles start with an intro heading and a placeholder paragraph."""
    article = new_article("Огаро", "characters")
    assert [(b.type, b.text) for b in article.blocks] == [
        ("heading", DEFAULT_HEADING),
        ("paragraph", DEFAULT_PARAGRAPH),
    ]
    assert article.category_id == "characters"
    assert article.tags == []


def test_create_and_load_for_editing(store):
    """A created article loads back as markdown text."""
    article = create_article(store, "Огаро")
    assert load_for_editing(store, article.id) == f"## {DEFAULT_HEADING}\n\n{DEFAULT_PARAGRAPH}"


def test_save_from_markdown_replaces_blocks(store):
    """Saving replaces all blocks, mints new ids, and bumps last_modified."""
    article = create_article(store, "Огаро")
    article.last_modified = datetime.now() - timedelta(days=1)
    store.put(article)
    old_ids = {b.id for b in article.blocks}

    saved = save_from_markdown(store, article.id, "# Кто\n\nТекст.\n\n```infobox\nИмя: Огаро\n```")

    assert [b.type for b in saved.blocks] == ["heading", "paragraph", "infobox"]
    assert not old_ids & {b.id for b in saved.blocks}
    assert saved.last_modified > article.last_modified
    stored = store.get(article.id)
    assert isinstance(stored.blocks[2], InfoboxBlock)
    assert stored.blocks[2].entries == [("Имя", "Огаро")]


def test_save_updates_title_and_tags_only_when_given(store):
    """title and tags change only when passed; duplicate tags are kept."""
    article = create_article(store, "Old")
    saved = save_from_markdown(store, article.id, "Body")
    assert saved.title == "Old"
    assert saved.tags == []

    saved = save_from_markdown(store, article.id, "Body", title="New", tags=["ГГ", "ГГ"])
    assert saved.title == "New"
    assert saved.tags == ["ГГ", "ГГ"]


def test_missing_article_raises(store):
    """Operations on unknown ids raise ValueError."""
    with pytest.raises(ValueError, match="not found"):
        load_for_editing(store, "nope")
    with pytest.raises(ValueError, match="not found"):
        save_from_markdown(store, "nope", "text")
    with pytest.raises(ValueError, match="not found"):
        delete_article(store, "nope")


def test_delete_article(store):
    """Deleted articles are gone from the store."""
    article = create_article(store, "Temp")
    delete_article(store, article.id)
    assert store.get(article.id) is None
