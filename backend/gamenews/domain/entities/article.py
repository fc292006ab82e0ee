"""Domain entities: pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4


@dataclass
class Article:
    """Core domain entity representing a published news article.

    ``id`` and ``publish_date`` are fixed at construction; only the title
    and body change afterwards (see :meth:`revise`).
    """

    title: str
    body: str
    publish_date: datetime
    id: str = field(default_factory=lambda: str(uuid4()))

    @classmethod
    def new_entry(cls, title: str, body: str, publish_date: datetime) -> "Article":
        """Create a new article with a freshly generated id."""
        return cls(title=title, body=body, publish_date=publish_date)

    def revise(self, title: str, body: str) -> None:
        """Replace the editable content of the article."""
        self.title = title
        self.body = body
