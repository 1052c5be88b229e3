"""
Unit tests for the line parsers.

Includes property-based testing with hypothesis for field mapping.
"""

import string
from datetime import date

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bookstore.core.errors import (
    InvalidCalendarDate,
    InvalidDate,
    InvalidEmail,
    InvalidField,
    InvalidIdentifier,
    MalformedRecord,
    RecordError,
)
from bookstore.core.models import Book, Customer, Purchase
from bookstore.core.parsers import (
    BookParser,
    CustomerParser,
    PurchaseParser,
    parse_float,
    parse_identifier,
    parse_int,
)

JOHN = "1|John|Doe|1 Main St|Springfield|12345|555-1234|john@example.com|20200115"


def customer_line(**overrides) -> str:
    fields = {
        "id": "1",
        "first_name": "John",
        "last_name": "Doe",
        "street": "1 Main St",
        "city": "Springfield",
        "postal_code": "12345",
        "phone": "555-1234",
        "email": "john@example.com",
        "joined": "20200115",
    }
    fields.update(overrides)
    return "|".join(fields.values())


@pytest.mark.unit
class TestFieldCoercion:
    """Tests for the shared coercion helpers"""

    def test_parse_identifier(self):
        assert parse_identifier("0") == 0
        assert parse_identifier("8479") == 8479

    @pytest.mark.parametrize("value", ["", "abc", "-1", "1.5", " 1", "1_000", "+1"])
    def test_parse_identifier_rejects(self, value):
        with pytest.raises(InvalidIdentifier) as exc_info:
            parse_identifier(value, "customer_id")

        assert exc_info.value.field_name == "customer_id"
        assert exc_info.value.value == value

    def test_parse_int_accepts_sign(self):
        assert parse_int("-12", "year") == -12

    def test_parse_int_rejects(self):
        with pytest.raises(InvalidField):
            parse_int("12.0", "year")

    @pytest.mark.parametrize("value", ["abc", "nan", "inf", ""])
    def test_parse_float_rejects(self, value):
        with pytest.raises(InvalidField):
            parse_float(value, "price")


@pytest.mark.unit
class TestCustomerParser:
    """Tests for CustomerParser"""

    def test_parses_example_line(self):
        """Test the reference line yields the expected Customer"""
        customer = CustomerParser().parse(JOHN)

        assert isinstance(customer, Customer)
        assert customer.id == 1
        assert customer.first_name == "John"
        assert customer.last_name == "Doe"
        assert customer.street == "1 Main St"
        assert customer.city == "Springfield"
        assert customer.postal_code == "12345"
        assert customer.phone == "555-1234"
        assert customer.email_address == "john@example.com"
        assert customer.joined_date == date(2020, 1, 15)

    def test_line_terminator_is_stripped(self):
        assert CustomerParser().parse(JOHN + "\r\n").joined_date == date(2020, 1, 15)

    def test_too_few_fields(self):
        """Test 7 fields is a MalformedRecord carrying the counts"""
        line = "|".join(JOHN.split("|")[:7])

        with pytest.raises(MalformedRecord) as exc_info:
            CustomerParser().parse(line)

        assert exc_info.value.expected == 9
        assert exc_info.value.actual == 7
        assert exc_info.value.fields == JOHN.split("|")[:7]
        assert "Expected 9 but got 7" in str(exc_info.value)

    def test_too_many_fields(self):
        with pytest.raises(MalformedRecord) as exc_info:
            CustomerParser().parse(JOHN + "|extra")

        assert exc_info.value.actual == 10

    def test_trailing_empty_fields_are_dropped(self):
        """Test an empty last field disappears, making the line short"""
        with pytest.raises(MalformedRecord) as exc_info:
            CustomerParser().parse(customer_line(joined=""))

        assert exc_info.value.actual == 8

    def test_empty_line_is_malformed(self):
        with pytest.raises(MalformedRecord) as exc_info:
            CustomerParser().parse("")

        assert exc_info.value.actual == 0

    def test_empty_inner_field_is_kept(self):
        customer = CustomerParser().parse(customer_line(street=""))
        assert customer.street == ""

    @pytest.mark.parametrize("raw_id", ["abc", "-5", "1.0", ""])
    def test_invalid_identifier(self, raw_id):
        """Test a non-numeric id is a recoverable record error"""
        with pytest.raises(InvalidIdentifier) as exc_info:
            CustomerParser().parse(customer_line(id=raw_id))

        assert exc_info.value.value == raw_id
        assert isinstance(exc_info.value, RecordError)

    def test_invalid_email(self):
        with pytest.raises(InvalidEmail) as exc_info:
            CustomerParser().parse(customer_line(email="not-an-email"))

        assert exc_info.value.value == "not-an-email"
        assert "not-an-email" in str(exc_info.value)

    @pytest.mark.parametrize("joined", ["19991231", "202013", "2020-01-15", "21000101"])
    def test_invalid_date_pattern(self, joined):
        """Test joined dates outside YYYYMMDD 2000-2099 are rejected with value and id"""
        with pytest.raises(InvalidDate) as exc_info:
            CustomerParser().parse(customer_line(id="42", joined=joined))

        assert exc_info.value.value == joined
        assert exc_info.value.record_id == 42
        assert "customer 42" in str(exc_info.value)

    @pytest.mark.parametrize("joined", ["20201301", "20200230", "20210229", "20200100", "20200432"])
    def test_invalid_calendar_date(self, joined):
        """Test pattern-valid but impossible dates fail at construction"""
        with pytest.raises(InvalidCalendarDate):
            CustomerParser().parse(customer_line(joined=joined))

    def test_custom_delimiter(self):
        """Test regex metacharacters in the delimiter are taken literally"""
        line = "1.John.Doe.1 Main St.Springfield.12345.555-1234.john@example|com.20200115"

        parser = CustomerParser(delimiter=".")
        with pytest.raises(InvalidEmail):
            parser.parse(line)

        customer = CustomerParser(delimiter=";").parse(JOHN.replace("|", ";"))
        assert customer.email_address == "john@example.com"

    def test_empty_delimiter_rejected(self):
        with pytest.raises(ValueError):
            CustomerParser(delimiter="")

    @given(
        fields=st.lists(
            st.text(alphabet=string.ascii_letters + string.digits + " -.,'", min_size=1, max_size=20),
            min_size=6,
            max_size=6,
        ),
        customer_id=st.integers(min_value=0, max_value=10**9),
        joined=st.dates(min_value=date(2000, 1, 1), max_value=date(2099, 12, 31)),
    )
    def test_property_fields_map_positionally(self, fields, customer_id, joined):
        """Property test: valid lines produce records equal to their split fields"""
        first_name, last_name, street, city, postal_code, phone = fields
        line = "|".join(
            [str(customer_id), *fields, "someone@example.com", joined.strftime("%Y%m%d")]
        )

        customer = CustomerParser().parse(line)

        assert customer.id == customer_id
        assert customer.first_name == first_name
        assert customer.last_name == last_name
        assert customer.street == street
        assert customer.city == city
        assert customer.postal_code == postal_code
        assert customer.phone == phone
        assert customer.email_address == "someone@example.com"
        assert customer.joined_date == joined

    @given(count=st.integers(min_value=1, max_value=20).filter(lambda n: n != 9))
    def test_property_wrong_arity_is_malformed(self, count):
        """Property test: any field count other than 9 is a MalformedRecord"""
        line = "|".join(["x"] * count)

        with pytest.raises(MalformedRecord) as exc_info:
            CustomerParser().parse(line)

        assert exc_info.value.actual == count


@pytest.mark.unit
class TestBookParser:
    """Tests for BookParser"""

    LINE = "1|439023483|Suzanne Collins|2008|The Hunger Games|4.34|4780653|https://images.example.com/1.jpg"

    def replace(self, index: int, value: str) -> str:
        fields = self.LINE.split("|")
        fields[index] = value
        return "|".join(fields)

    def test_parses_book(self):
        book = BookParser().parse(self.LINE)

        assert isinstance(book, Book)
        assert book.id == 1
        assert book.isbn == "439023483"
        assert book.authors == "Suzanne Collins"
        assert book.original_publication_year == 2008
        assert book.original_title == "The Hunger Games"
        assert book.average_rating == pytest.approx(4.34)
        assert book.ratings_count == 4780653
        assert book.image_url == "https://images.example.com/1.jpg"

    def test_negative_publication_year_allowed(self):
        """Test ancient works with BCE years still parse"""
        book = BookParser().parse(self.replace(3, "-750"))
        assert book.original_publication_year == -750

    def test_wrong_field_count(self):
        with pytest.raises(MalformedRecord) as exc_info:
            BookParser().parse("1|439023483|Suzanne Collins")

        assert exc_info.value.expected == 8

    @pytest.mark.parametrize("index,value,field_name", [
        (3, "two thousand", "original_publication_year"),
        (5, "5.1", "average_rating"),
        (5, "-0.5", "average_rating"),
        (5, "great", "average_rating"),
        (6, "-1", "ratings_count"),
        (6, "1.5", "ratings_count"),
    ])
    def test_invalid_fields(self, index, value, field_name):
        with pytest.raises(InvalidField) as exc_info:
            BookParser().parse(self.replace(index, value))

        assert exc_info.value.field_name == field_name
        assert exc_info.value.value == value

    def test_invalid_identifier(self):
        with pytest.raises(InvalidIdentifier):
            BookParser().parse(self.replace(0, "B1"))


@pytest.mark.unit
class TestPurchaseParser:
    """Tests for PurchaseParser"""

    def test_parses_purchase(self):
        purchase = PurchaseParser().parse("1|2|3|12.99")

        assert isinstance(purchase, Purchase)
        assert (purchase.id, purchase.customer_id, purchase.book_id) == (1, 2, 3)
        assert purchase.price == pytest.approx(12.99)

    def test_zero_price_allowed(self):
        assert PurchaseParser().parse("1|2|3|0").price == 0.0

    @pytest.mark.parametrize("line,field_name", [
        ("x|2|3|1.00", "id"),
        ("1|abc|3|1.00", "customer_id"),
        ("1|2|-3|1.00", "book_id"),
    ])
    def test_invalid_identifiers(self, line, field_name):
        with pytest.raises(InvalidIdentifier) as exc_info:
            PurchaseParser().parse(line)

        assert exc_info.value.field_name == field_name

    @pytest.mark.parametrize("price", ["-1.00", "free", "nan"])
    def test_invalid_price(self, price):
        with pytest.raises(InvalidField) as exc_info:
            PurchaseParser().parse(f"1|2|3|{price}")

        assert exc_info.value.field_name == "price"

    def test_wrong_field_count(self):
        with pytest.raises(MalformedRecord) as exc_info:
            PurchaseParser().parse("1|2|3")

        assert (exc_info.value.expected, exc_info.value.actual) == (4, 3)
