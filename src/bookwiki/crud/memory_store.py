from dataclasses import dataclass, field

from bookwiki.core.models import Article
from bookwiki.crud.store import ArticleStore


@dataclass
class MemoryStore(ArticleStore):
    _articles: dict[str, Article] = field(default_factory=dict)

    def get(self, article_id: str) -> Article | None:
        article = self._articles.get(article_id)
        return article.model_copy(deep=True) if article else None

    def put(self, article: Article) -> Article:
        self._articles[article.id] = article.model_copy(deep=True)
        return article

    def delete(self, article_id: str) -> bool:
        return self._articles.pop(article_id, None) is not None

    def list(self) -> list[Article]:
        articles = sorted(self._articles.values(), key=lambda a: a.last_modified, reverse=True)
        return [a.model_copy(deep=True) for a in articles]
