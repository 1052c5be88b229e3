"""
RejectedLine model for input lines dropped during a load.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class RejectedLine(BaseModel):
    """
    An input line that could not be turned into a record.

    Attributes:
        entity: Record type being loaded ("customer", "book", "purchase")
        source_path: File the line came from
        line_number: 1-based line number in the file (header is line 1)
        raw_line: The line as read, without its terminator
        error_type: Name of the RecordError subclass raised
        error_message: Human readable reason
        rejected_at: When the line was rejected
    """

    entity: str
    source_path: str
    line_number: int = Field(..., ge=2)
    raw_line: str
    error_type: str
    error_message: str
    rejected_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "entity": "customer",
                "source_path": "customers.dat",
                "line_number": 4,
                "raw_line": "3|Jane|Roe|2 Elm St|Shelbyville|54321|555-9876|jane-at-example|20210301",
                "error_type": "InvalidEmail",
                "error_message": "Invalid email: jane-at-example",
            }
        }
