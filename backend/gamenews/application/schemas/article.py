"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class ArticleCreate(BaseModel):
    """Form data for creating a new article."""

    title: str = Field(..., examples=["Vanu has turned the tide"])
    body: str = Field(..., examples=["With the release of this app, Vanu grows stronger"])
    publish_date: str = Field(..., examples=["2023-04-16 16:41:00"])

    model_config = {"str_strip_whitespace": True}


class ArticleUpdate(BaseModel):
    """Form data for editing an article: id and publish date are not editable."""

    title: str
    body: str

    model_config = {"str_strip_whitespace": True}


class ArticleResponse(BaseModel):
    """Article as handed to templates."""

    id: str
    title: str
    body: str
    publish_date: datetime

    model_config = {"from_attributes": True}


class ArticleView(BaseModel):
    """A single article plus the viewer's admin flag (controls edit/delete buttons)."""

    article: ArticleResponse
    is_admin: bool


class ArticlePage(BaseModel):
    """One page of the article listing together with its page descriptor."""

    articles: list[ArticleResponse]
    page_size: int
    page_number: int
    total_count: int
    page_count: int
    is_admin: bool

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.page_count

    @property
    def page_numbers(self) -> range:
        return range(1, self.page_count + 1)
