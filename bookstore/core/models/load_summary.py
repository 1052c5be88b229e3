"""
LoadSummary model describing the outcome of reading one data file.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator


class LoadSummary(BaseModel):
    """
    Counts collected while reading one data file.

    Attributes:
        entity: Record type loaded
        source_path: File that was read
        lines_read: Data lines read, header excluded
        records_loaded: Unique records in the resulting dataset
        rejected_count: Lines dropped because of a record error
        duplicate_ids: Ids seen more than once, in encounter order
    """

    entity: str
    source_path: str
    lines_read: int = Field(0, ge=0)
    records_loaded: int = Field(0, ge=0)
    rejected_count: int = Field(0, ge=0)
    duplicate_ids: List[int] = Field(default_factory=list)

    @field_validator("rejected_count")
    @classmethod
    def check_counts_consistency(cls, v, info):
        """Validate that loaded and rejected lines never exceed lines read."""
        lines_read = info.data.get("lines_read", 0)
        records_loaded = info.data.get("records_loaded", 0)
        if records_loaded + v > lines_read:
            raise ValueError(
                f"records_loaded ({records_loaded}) + rejected_count ({v}) exceeds lines_read ({lines_read})"
            )
        return v

    @property
    def duplicate_count(self) -> int:
        return len(self.duplicate_ids)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "entity": "customer",
                "source_path": "customers.dat",
                "lines_read": 10,
                "records_loaded": 8,
                "rejected_count": 1,
                "duplicate_ids": [7],
            }
        }
