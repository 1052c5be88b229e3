"""
Aggregate loading of the customer, book and purchase datasets.

Coordinates the flow: customers → books → purchases → publish
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from bookstore.batch.readers import BookReader, CustomerReader, DatasetReader, PurchaseReader
from bookstore.config import BookstoreSettings
from bookstore.core.errors import LoadError
from bookstore.core.models import Book, Customer, LoadSummary, Purchase, RejectedLine
from bookstore.observability.logger import get_logger
from bookstore.observability.metrics import record_load_failure


logger = get_logger(__name__)


@dataclass(frozen=True)
class Dataset:
    """
    The complete, read-only result of one load.

    The mappings are read-only views keyed by record id.
    """

    customers: Mapping[int, Customer]
    books: Mapping[int, Book]
    purchases: Mapping[int, Purchase]
    summaries: tuple[LoadSummary, ...] = ()
    rejected: tuple[RejectedLine, ...] = ()


class DataLoader:
    """
    Loads all three datasets in a fixed order.

    The dataset is published on `dataset` only when every reader succeeds;
    a fatal error from any reader leaves it unset and propagates.
    """

    def __init__(self, settings: BookstoreSettings):
        """
        Initialize data loader.

        Args:
            settings: Input locations and file format options
        """
        self.settings = settings
        self.dataset: Dataset | None = None

    def _reader(self, reader_class: type[DatasetReader], entity: str) -> DatasetReader:
        return reader_class(
            self.settings.path_for(entity),
            delimiter=self.settings.field_delimiter,
            encoding=self.settings.encoding,
        )

    def load(self) -> Dataset:
        """
        Read customers, then books, then purchases.

        Returns:
            The published Dataset

        Raises:
            LoadError: If any data file cannot be opened or read
        """
        readers = [
            self._reader(CustomerReader, "customer"),
            self._reader(BookReader, "book"),
            self._reader(PurchaseReader, "purchase"),
        ]

        results = []
        for reader in readers:
            try:
                results.append(reader.read())
            except LoadError as e:
                logger.error(f"Aborting load, cannot read {reader.entity} data: {e}")
                record_load_failure(reader.entity, e)
                raise

        customers, books, purchases = results
        self.dataset = Dataset(
            customers=MappingProxyType(customers),
            books=MappingProxyType(books),
            purchases=MappingProxyType(purchases),
            summaries=tuple(reader.summary for reader in readers),
            rejected=tuple(line for reader in readers for line in reader.rejected),
        )
        return self.dataset


def load_dataset(settings: BookstoreSettings) -> Dataset:
    """Load and return the full dataset described by settings."""
    return DataLoader(settings).load()
