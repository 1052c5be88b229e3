"""
CustomerParser - parses customers.dat lines.
"""

from bookstore.core.errors import InvalidDate, InvalidEmail
from bookstore.core.models import Customer, CustomerBuilder
from bookstore.core.validators import validate_email, validate_joined_date

from .base_parser import LineParser, parse_identifier


class CustomerParser(LineParser):
    """
    Parses a customer line.

    Field order:
        id|first_name|last_name|street|city|postal_code|phone|email|yyyymmdd
    """

    entity = "customer"
    record_class = Customer

    def build(self, fields: list[str]) -> Customer:
        (
            raw_id,
            first_name,
            last_name,
            street,
            city,
            postal_code,
            phone,
            email_address,
            yyyymmdd,
        ) = fields

        customer_id = parse_identifier(raw_id)

        if not validate_email(email_address):
            raise InvalidEmail(email_address)

        if not validate_joined_date(yyyymmdd):
            raise InvalidDate(yyyymmdd, customer_id)
        year = int(yyyymmdd[0:4])
        month = int(yyyymmdd[4:6])
        day = int(yyyymmdd[6:8])

        return (
            CustomerBuilder(customer_id, phone)
            .set_first_name(first_name)
            .set_last_name(last_name)
            .set_street(street)
            .set_city(city)
            .set_postal_code(postal_code)
            .set_email_address(email_address)
            .set_joined_date(year, month, day)
            .build()
        )
