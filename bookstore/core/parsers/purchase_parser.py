"""
PurchaseParser - parses purchases.dat lines.
"""

from bookstore.core.errors import InvalidField
from bookstore.core.models import Purchase, PurchaseBuilder

from .base_parser import LineParser, parse_float, parse_identifier


class PurchaseParser(LineParser):
    """
    Parses a purchase line.

    Field order:
        id|customer_id|book_id|price
    """

    entity = "purchase"
    record_class = Purchase

    def build(self, fields: list[str]) -> Purchase:
        raw_id, raw_customer_id, raw_book_id, raw_price = fields

        purchase_id = parse_identifier(raw_id)
        customer_id = parse_identifier(raw_customer_id, "customer_id")
        book_id = parse_identifier(raw_book_id, "book_id")

        price = parse_float(raw_price, "price")
        if price < 0:
            raise InvalidField("price", raw_price, "must not be negative")

        return (
            PurchaseBuilder(purchase_id)
            .set_customer_id(customer_id)
            .set_book_id(book_id)
            .set_price(price)
            .build()
        )
