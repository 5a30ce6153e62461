"""Article store interface: get/put/delete by id"""

from abc import ABC, abstractmethod

from bookwiki.core.models import Article


class ArticleStore(ABC):
    @abstractmethod
    def get(self, article_id: str) -> Article | None:
        """Return the article with the given id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def put(self, article: Article) -> Article:
        """Insert or replace an article by id."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, article_id: str) -> bool:
        """Remove an article. Returns False if it did not exist."""
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Article]:
        raise NotImplementedError
