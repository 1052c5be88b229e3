"""
Purchase record and its builder.
"""

from typing import ClassVar

from pydantic import BaseModel, Field

from .builder import RecordBuilder


class Purchase(BaseModel):
    """
    A single purchase of one book by one customer.

    customer_id and book_id reference the customers and books datasets;
    the reference is not checked at load time.
    """

    ATTRIBUTE_COUNT: ClassVar[int] = 4

    id: int = Field(..., ge=0)
    customer_id: int = Field(..., ge=0)
    book_id: int = Field(..., ge=0)
    price: float = Field(..., ge=0.0, allow_inf_nan=False)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "customer_id": 1,
                "book_id": 1,
                "price": 12.99,
            }
        }


class PurchaseBuilder(RecordBuilder):
    """Fluent builder for Purchase."""

    model = Purchase

    def __init__(self, id: int):
        super().__init__(id=id)

    def set_customer_id(self, customer_id: int) -> "PurchaseBuilder":
        return self._set("customer_id", customer_id)

    def set_book_id(self, book_id: int) -> "PurchaseBuilder":
        return self._set("book_id", book_id)

    def set_price(self, price: float) -> "PurchaseBuilder":
        return self._set("price", price)
