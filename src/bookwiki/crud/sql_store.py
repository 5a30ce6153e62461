"""sqlmodel-backed article store"""

import logging

from sqlmodel import Session, select

from bookwiki.core.models import Article
from bookwiki.crud.store import ArticleStore
from bookwiki.crud.tables import ArticleRow


logger = logging.getLogger(__name__)


def _row_to_article(r: ArticleRow) -> Article:
    return Article(
        id=r.id,
        title=r.title,
        category_id=r.category_id,
        tags=list(r.tags or []),
        blocks=list(r.blocks or []),
        last_modified=r.last_modified,
    )


def _article_to_row(article: Article, existing: ArticleRow | None) -> ArticleRow:
    row = existing or ArticleRow(id=article.id, title=article.title)
    row.title = article.title
    row.category_id = article.category_id
    row.tags = list(article.tags)
    row.blocks = [b.model_dump(mode="json") for b in article.blocks]
    row.last_modified = article.last_modified
    return row


class SQLStore(ArticleStore):
    """Article store over an open session. Each put/delete commits."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, article_id: str) -> Article | None:
        row = self.session.get(ArticleRow, article_id)
        return _row_to_article(row) if row else None

    def put(self, article: Article) -> Article:
        row = _article_to_row(article, existing=self.session.get(ArticleRow, article.id))
        self.session.add(row)
        self.session.commit()
        logger.info("Stored article %s (%d blocks)", article.id, len(article.blocks))
        return article

    def delete(self, article_id: str) -> bool:
        row = self.session.get(ArticleRow, article_id)
        if row is None:
            return False
        self.session.delete(row)
        self.session.commit()
        logger.info("Deleted article %s", article_id)
        return True

    def list(self) -> list[Article]:
        rows = self.session.exec(select(ArticleRow).order_by(ArticleRow.last_modified.desc())).all()
        return [_row_to_article(r) for r in rows]
