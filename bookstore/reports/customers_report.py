"""
Customers report.
"""

from bookstore.batch import Dataset

from .base_report import Report

ROW_FORMAT = "{:>5} {:<12} {:<12} {:<25} {:<12} {:<12} {:<15} {:<40} {}"


class CustomersReport(Report):
    """Lists every customer, by id or by joined date."""

    TITLE = "Customers Report"
    REPORT_FILENAME = "customers_report.txt"

    def __init__(self, dataset: Dataset, by_join_date: bool = False, descending: bool = False):
        super().__init__(dataset, descending)
        self.by_join_date = by_join_date

    def render(self) -> list[str]:
        customers = list(self.dataset.customers.values())
        if self.by_join_date:
            customers.sort(key=lambda c: (c.joined_date, c.id), reverse=self.descending)
        else:
            customers.sort(key=lambda c: c.id, reverse=self.descending)

        header = ROW_FORMAT.format(
            "ID", "First name", "Last name", "Street", "City", "Postal Code", "Phone", "Email", "Join Date"
        )
        lines = self._heading(header)
        for c in customers:
            lines.append(
                ROW_FORMAT.format(
                    c.id,
                    c.first_name,
                    c.last_name,
                    c.street,
                    c.city,
                    c.postal_code,
                    c.phone,
                    c.email_address,
                    c.joined_date.strftime("%b %d %Y"),
                )
            )
        return lines
