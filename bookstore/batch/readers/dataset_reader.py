"""
Dataset readers for the pipe-delimited bookstore files.

Each reader opens one file, skips its header line, parses every following
line and returns a dict keyed by record id. Bad lines are logged and kept
as RejectedLine entries; only failures to open or read the file abort.
"""

from pathlib import Path
from typing import Any

from bookstore.core.errors import DataSourceUnavailable, IOFailure, RecordError
from bookstore.core.models import LoadSummary, RejectedLine
from bookstore.core.parsers import (
    FIELD_DELIMITER,
    BookParser,
    CustomerParser,
    LineParser,
    PurchaseParser,
)
from bookstore.observability.logger import get_logger
from bookstore.observability.metrics import (
    load_duration_seconds,
    record_dataset_load,
    track_duration,
)


logger = get_logger(__name__)


class DatasetReader:
    """
    Reads one data file into a dict of records.

    Flow:
    1. Open the file (DataSourceUnavailable on failure)
    2. Discard the header line
    3. Parse each line; reject bad lines, overwrite duplicate ids
    4. Close the file on every exit path (IOFailure on read errors)
    """

    FILENAME: str = ""
    parser_class: type[LineParser]

    def __init__(
        self,
        file_path: str | Path | None = None,
        delimiter: str = FIELD_DELIMITER,
        encoding: str = "utf-8",
        parser: LineParser | None = None,
    ):
        """
        Initialize dataset reader.

        Args:
            file_path: File to read (defaults to FILENAME in the working directory)
            delimiter: Field delimiter passed to the parser
            encoding: Text encoding of the file
            parser: Explicit parser; built from parser_class when omitted
        """
        self.file_path = Path(file_path or self.FILENAME)
        self.encoding = encoding
        self.parser = parser or self.parser_class(delimiter)
        self.rejected: list[RejectedLine] = []
        self.summary: LoadSummary | None = None

    @property
    def entity(self) -> str:
        return self.parser.entity

    def read(self) -> dict[int, Any]:
        """
        Read the file.

        Returns:
            Mapping of record id to record

        Raises:
            DataSourceUnavailable: If the file cannot be opened
            IOFailure: If reading fails part way through
        """
        logger.debug(f"Reading {self.file_path.resolve()}")

        with track_duration(load_duration_seconds, entity=self.entity):
            records, rejected, duplicate_ids, lines_read = self._read_lines()

        self.rejected = rejected
        self.summary = LoadSummary(
            entity=self.entity,
            source_path=str(self.file_path),
            lines_read=lines_read,
            records_loaded=len(records),
            rejected_count=len(rejected),
            duplicate_ids=duplicate_ids,
        )
        record_dataset_load(self.summary)

        logger.info(
            f"Loaded {len(records)} {self.entity} records from {self.file_path} "
            f"({len(rejected)} rejected, {len(duplicate_ids)} duplicates)"
        )
        return records

    def _read_lines(self) -> tuple[dict[int, Any], list[RejectedLine], list[int], int]:
        records: dict[int, Any] = {}
        rejected: list[RejectedLine] = []
        duplicate_ids: list[int] = []
        lines_read = 0

        try:
            source = open(self.file_path, encoding=self.encoding)
        except OSError as e:
            raise DataSourceUnavailable(str(self.file_path), e.strerror or str(e)) from e

        with source:
            try:
                source.readline()  # skip the header line
                for line_number, line in enumerate(source, start=2):
                    lines_read += 1
                    line = line.rstrip("\r\n")
                    logger.debug(f"line {line_number}: {line}")

                    try:
                        record = self.parser.parse(line)
                    except RecordError as e:
                        logger.error(f"{self.file_path}:{line_number}: {e}")
                        rejected.append(
                            RejectedLine(
                                entity=self.entity,
                                source_path=str(self.file_path),
                                line_number=line_number,
                                raw_line=line,
                                error_type=type(e).__name__,
                                error_message=str(e),
                            )
                        )
                        continue

                    if record.id in records:
                        logger.warning(f"{self.entity.capitalize()} exists: {record.id}, replacing with line {line_number}")
                        duplicate_ids.append(record.id)
                    records[record.id] = record
            except (OSError, UnicodeDecodeError) as e:
                raise IOFailure(str(self.file_path), str(e)) from e

        return records, rejected, duplicate_ids, lines_read


class CustomerReader(DatasetReader):
    """Reads customers.dat."""

    FILENAME = "customers.dat"
    parser_class = CustomerParser


class BookReader(DatasetReader):
    """Reads books.dat."""

    FILENAME = "books.dat"
    parser_class = BookParser


class PurchaseReader(DatasetReader):
    """Reads purchases.dat."""

    FILENAME = "purchases.dat"
    parser_class = PurchaseParser
