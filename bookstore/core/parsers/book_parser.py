"""
BookParser - parses books.dat lines.
"""

from bookstore.core.errors import InvalidField
from bookstore.core.models import Book, BookBuilder

from .base_parser import LineParser, parse_float, parse_identifier, parse_int

MIN_RATING = 0.0
MAX_RATING = 5.0


class BookParser(LineParser):
    """
    Parses a book line.

    Field order:
        id|isbn|authors|year|title|average_rating|ratings_count|image_url
    """

    entity = "book"
    record_class = Book

    def build(self, fields: list[str]) -> Book:
        (
            raw_id,
            isbn,
            authors,
            raw_year,
            title,
            raw_rating,
            raw_count,
            image_url,
        ) = fields

        book_id = parse_identifier(raw_id)
        year = parse_int(raw_year, "original_publication_year")

        rating = parse_float(raw_rating, "average_rating")
        if not MIN_RATING <= rating <= MAX_RATING:
            raise InvalidField(
                "average_rating", raw_rating, f"must be between {MIN_RATING} and {MAX_RATING}"
            )

        ratings_count = parse_int(raw_count, "ratings_count")
        if ratings_count < 0:
            raise InvalidField("ratings_count", raw_count, "must not be negative")

        return (
            BookBuilder(book_id)
            .set_isbn(isbn)
            .set_authors(authors)
            .set_original_publication_year(year)
            .set_original_title(title)
            .set_average_rating(rating)
            .set_ratings_count(ratings_count)
            .set_image_url(image_url)
            .build()
        )
