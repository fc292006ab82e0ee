"""Abstract repository interfaces (ports): define the contract, not the implementation."""

from abc import ABC, abstractmethod

from gamenews.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence: implemented in the infrastructure layer.

    Write operations report the store's acknowledgment as a boolean rather
    than raising, so callers can tell "declined" apart from a crash.
    """

    @abstractmethod
    async def count(self) -> int:
        """Return the total number of stored articles."""
        ...

    @abstractmethod
    async def fetch_page(self, page_number: int, page_size: int) -> list[Article]:
        """Return one page of articles, newest ``publish_date`` first.

        Pages past the end yield an empty list.
        """
        ...

    @abstractmethod
    async def fetch_by_id(self, article_id: str) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def insert(self, article: Article) -> bool:
        """Persist a new article. Returns True if the store accepted it."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> bool:
        """Overwrite an existing article. Returns False if it does not exist."""
        ...

    @abstractmethod
    async def delete(self, article_id: str) -> bool:
        """Delete an article. Returns False if it does not exist."""
        ...
