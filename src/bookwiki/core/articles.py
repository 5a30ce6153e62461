"""Article editing workflow: load as markdown, save from markdown, over an injected store"""

import logging
from datetime import datetime

from bookwiki.core.models import Article, HeadingBlock, ParagraphBlock
from bookwiki.core.serializer import blocks_to_markdown, markdown_to_blocks
from bookwiki.crud.store import ArticleStore


logger = logging.getLogger(__name__)

DEFAULT_HEADING = "Введение"
DEFAULT_PARAGRAPH = "Текст..."


def _require(store: ArticleStore, article_id: str) -> Article:
    article = store.get(article_id)
    if article is None:
        raise ValueError(f"Article {article_id} not found")
    return article


def new_article(title: str, category_id: str | None = None) -> Article:
    """Build an unsaved article seeded with an intro heading and placeholder paragraph."""
    return Article(
        title=title,
        category_id=category_id,
        blocks=[HeadingBlock(text=DEFAULT_HEADING), ParagraphBlock(text=DEFAULT_PARAGRAPH)],
    )


def create_article(store: ArticleStore, title: str, category_id: str | None = None) -> Article:
    """Create, store, and return a new seeded article."""
    article = store.put(new_article(title, category_id))
    logger.info("Created article %s (%r)", article.id, title)
    return article


def load_for_editing(store: ArticleStore, article_id: str) -> str:
    """Return the markdown editing text for a stored article. Raises ValueError if missing."""
    return blocks_to_markdown(_require(store, article_id).blocks)


def save_from_markdown(
    store: ArticleStore,
    article_id: str,
    markdown: str,
    title: str | None = None,
    tags: list[str] | None = None,
    ) -> Article:
    """Reparse edited markdown and replace the article's blocks wholesale.

    Blocks get new ids on every save, so anchors into the previous version are
    invalidated. title/tags are updated only when given. Raises ValueError if missing.
    """
    article = _require(store, article_id)
    update = {"blocks": markdown_to_blocks(markdown), "last_modified": datetime.now()}
    if title is not None:
        update["title"] = title
    if tags is not None:
        update["tags"] = list(tags)
    saved = store.put(article.model_copy(update=update))
    logger.info("Saved article %s (%d blocks)", saved.id, len(saved.blocks))
    return saved


def delete_article(store: ArticleStore, article_id: str) -> None:
    """Delete a stored article. Raises ValueError if missing."""
    if not store.delete(article_id):
        raise ValueError(f"Article {article_id} not found")
    logger.info("Deleted article %s", article_id)
