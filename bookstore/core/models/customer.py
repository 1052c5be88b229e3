"""
Customer record and its builder.
"""

from datetime import date
from typing import ClassVar

from pydantic import BaseModel, Field, field_validator

from bookstore.core.errors import InvalidCalendarDate
from bookstore.core.validators import validate_email

from .builder import RecordBuilder


class Customer(BaseModel):
    """
    A bookstore customer, immutable once built.

    Attributes:
        id: Unique customer identifier (key of the customers dataset)
        first_name: Given name
        last_name: Family name
        street: Street address
        city: City
        postal_code: Postal code
        phone: Phone number, free text
        email_address: Email address matching EMAIL_PATTERN
        joined_date: Date the customer joined
    """

    ATTRIBUTE_COUNT: ClassVar[int] = 9

    id: int = Field(..., ge=0)
    first_name: str
    last_name: str
    street: str
    city: str
    postal_code: str
    phone: str
    email_address: str
    joined_date: date

    @field_validator("email_address")
    @classmethod
    def check_email(cls, v):
        if not validate_email(v):
            raise ValueError(f"invalid email address {v!r}")
        return v

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "first_name": "John",
                "last_name": "Doe",
                "street": "1 Main St",
                "city": "Springfield",
                "postal_code": "12345",
                "phone": "555-1234",
                "email_address": "john@example.com",
                "joined_date": "2020-01-15",
            }
        }


class CustomerBuilder(RecordBuilder):
    """
    Fluent builder for Customer. The id and phone are required up front.

    Usage:
        customer = (
            CustomerBuilder(1, "555-1234")
            .set_first_name("John")
            .set_last_name("Doe")
            ...
            .set_joined_date(2020, 1, 15)
            .build()
        )
    """

    model = Customer

    def __init__(self, id: int, phone: str):
        super().__init__(id=id, phone=phone)

    def set_first_name(self, first_name: str) -> "CustomerBuilder":
        return self._set("first_name", first_name)

    def set_last_name(self, last_name: str) -> "CustomerBuilder":
        return self._set("last_name", last_name)

    def set_street(self, street: str) -> "CustomerBuilder":
        return self._set("street", street)

    def set_city(self, city: str) -> "CustomerBuilder":
        return self._set("city", city)

    def set_postal_code(self, postal_code: str) -> "CustomerBuilder":
        return self._set("postal_code", postal_code)

    def set_email_address(self, email_address: str) -> "CustomerBuilder":
        return self._set("email_address", email_address)

    def set_joined_date(self, year: int, month: int, day: int) -> "CustomerBuilder":
        """
        Set the joined date from its components.

        Raises:
            InvalidCalendarDate: If the components do not form a real date
        """
        try:
            joined = date(year, month, day)
        except ValueError as e:
            raise InvalidCalendarDate(year, month, day, str(e)) from e
        return self._set("joined_date", joined)
