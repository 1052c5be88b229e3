"""
Purchases report.

Joins each purchase with its customer and book. Purchases whose customer
or book is not in the dataset are left out and logged.
"""

from bookstore.batch import Dataset
from bookstore.observability.logger import get_logger

from .base_report import Report, truncate

ROW_FORMAT = "{:<24} {:<24} {:<60} {:>10}"
TITLE_WIDTH = 60


logger = get_logger(__name__)


class PurchasesReport(Report):
    """
    Lists purchases with customer names and book titles.

    Options:
    - customer_id: Only include this customer's purchases
    - by_last_name: Sort by customer last name
    - by_title: Sort by book title
    - total: Append the total value of the listed purchases
    """

    TITLE = "Purchases Report"
    REPORT_FILENAME = "purchases_report.txt"

    def __init__(
        self,
        dataset: Dataset,
        customer_id: int | None = None,
        by_last_name: bool = False,
        by_title: bool = False,
        descending: bool = False,
        total: bool = False,
    ):
        super().__init__(dataset, descending)
        self.customer_id = customer_id
        self.by_last_name = by_last_name
        self.by_title = by_title
        self.total = total

    def _rows(self) -> list[tuple[int, str, str, str, float]]:
        rows = []
        for purchase in self.dataset.purchases.values():
            if self.customer_id is not None and purchase.customer_id != self.customer_id:
                continue

            customer = self.dataset.customers.get(purchase.customer_id)
            book = self.dataset.books.get(purchase.book_id)
            if customer is None:
                logger.warning(f"Purchase {purchase.id} references unknown customer {purchase.customer_id}")
                continue
            if book is None:
                logger.warning(f"Purchase {purchase.id} references unknown book {purchase.book_id}")
                continue

            rows.append((purchase.id, customer.first_name, customer.last_name, book.original_title, purchase.price))

        if self.by_last_name:
            rows.sort(key=lambda r: (r[2].lower(), r[1].lower(), r[0]), reverse=self.descending)
        elif self.by_title:
            rows.sort(key=lambda r: (r[3].lower(), r[0]), reverse=self.descending)
        else:
            rows.sort(key=lambda r: r[0], reverse=self.descending)
        return rows

    def render(self) -> list[str]:
        header = ROW_FORMAT.format("First name", "Last name", "Title", "Price")
        lines = self._heading(header)

        rows = self._rows()
        for _, first_name, last_name, title, price in rows:
            lines.append(ROW_FORMAT.format(first_name, last_name, truncate(title, TITLE_WIDTH), f"${price:.2f}"))

        if self.total:
            lines.append("")
            lines.append(f"Value of purchases: ${sum(r[4] for r in rows):,.2f}")
        return lines
