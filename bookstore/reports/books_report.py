"""
Books report.
"""

from bookstore.batch import Dataset

from .base_report import Report, truncate

ROW_FORMAT = "{:>8} {:<12} {:<40} {:<40} {:>4} {:>6} {:>13}"
TEXT_WIDTH = 40


class BooksReport(Report):
    """Lists every book, by id or by author."""

    TITLE = "Books Report"
    REPORT_FILENAME = "books_report.txt"

    def __init__(self, dataset: Dataset, by_author: bool = False, descending: bool = False):
        super().__init__(dataset, descending)
        self.by_author = by_author

    def render(self) -> list[str]:
        books = list(self.dataset.books.values())
        if self.by_author:
            books.sort(key=lambda b: (b.authors.lower(), b.id), reverse=self.descending)
        else:
            books.sort(key=lambda b: b.id, reverse=self.descending)

        header = ROW_FORMAT.format("ID", "ISBN", "Authors", "Title", "Year", "Rating", "Ratings Count")
        lines = self._heading(header)
        for b in books:
            lines.append(
                ROW_FORMAT.format(
                    b.id,
                    b.isbn,
                    truncate(b.authors, TEXT_WIDTH),
                    truncate(b.original_title, TEXT_WIDTH),
                    b.original_publication_year,
                    f"{b.average_rating:.2f}",
                    b.ratings_count,
                )
            )
        return lines
