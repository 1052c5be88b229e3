"""
Book record and its builder.
"""

from typing import ClassVar

from pydantic import BaseModel, Field

from .builder import RecordBuilder


class Book(BaseModel):
    """
    A book in the catalogue, immutable once built.

    Attributes:
        id: Unique book identifier (key of the books dataset)
        isbn: ISBN as printed in the source file
        authors: Comma separated author names
        original_publication_year: Year of first publication
        original_title: Title
        average_rating: Mean reader rating, 0.0 to 5.0
        ratings_count: Number of ratings
        image_url: Cover image URL
    """

    ATTRIBUTE_COUNT: ClassVar[int] = 8

    id: int = Field(..., ge=0)
    isbn: str
    authors: str
    original_publication_year: int
    original_title: str
    average_rating: float = Field(..., ge=0.0, le=5.0)
    ratings_count: int = Field(..., ge=0)
    image_url: str

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "isbn": "439023483",
                "authors": "Suzanne Collins",
                "original_publication_year": 2008,
                "original_title": "The Hunger Games",
                "average_rating": 4.34,
                "ratings_count": 4780653,
                "image_url": "https://images.example.com/2767052.jpg",
            }
        }


class BookBuilder(RecordBuilder):
    """Fluent builder for Book."""

    model = Book

    def __init__(self, id: int):
        super().__init__(id=id)

    def set_isbn(self, isbn: str) -> "BookBuilder":
        return self._set("isbn", isbn)

    def set_authors(self, authors: str) -> "BookBuilder":
        return self._set("authors", authors)

    def set_original_publication_year(self, year: int) -> "BookBuilder":
        return self._set("original_publication_year", year)

    def set_original_title(self, title: str) -> "BookBuilder":
        return self._set("original_title", title)

    def set_average_rating(self, rating: float) -> "BookBuilder":
        return self._set("average_rating", rating)

    def set_ratings_count(self, count: int) -> "BookBuilder":
        return self._set("ratings_count", count)

    def set_image_url(self, url: str) -> "BookBuilder":
        return self._set("image_url", url)
