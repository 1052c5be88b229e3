"""
Prometheus metrics for bookstore data loads

The loader is a one-shot batch job, so metrics are kept in a private
registry and can be written to a node_exporter textfile at the end of a run.
"""
import time

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
    write_to_textfile,
)

from bookstore.core.models import LoadSummary


# Private registry; nothing else is exported from this process
REGISTRY = CollectorRegistry()


# =======================
# LOAD METRICS
# =======================

# Records seen per entity and outcome
records_total = Counter(
    name="bookstore_records_total",
    documentation="Total number of data lines processed per entity",
    labelnames=["entity", "status"],  # status: loaded, rejected, duplicate
    registry=REGISTRY,
)

# Time spent reading one data file
load_duration_seconds = Histogram(
    name="bookstore_load_duration_seconds",
    documentation="Time spent reading one data file in seconds",
    labelnames=["entity"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
    registry=REGISTRY,
)

# Fatal load errors
load_failures_total = Counter(
    name="bookstore_load_failures_total",
    documentation="Total number of loads aborted by a fatal error",
    labelnames=["entity", "error_type"],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """Render the bookstore registry in the Prometheus exposition format."""
    return generate_latest(REGISTRY)


def write_metrics(path: str) -> None:
    """
    Write the registry to a textfile for the node_exporter textfile collector

    Args:
        path: Destination file
    """
    write_to_textfile(path, REGISTRY)


class track_duration:
    """
    Observe the wall-clock time of a block in a histogram

    The observation is made whether or not the block raises.

    Usage:
        with track_duration(load_duration_seconds, entity="customer") as timer:
            ...
        timer.seconds
    """

    def __init__(self, histogram: Histogram, **labels):
        self.child = histogram.labels(**labels)
        self.seconds: float | None = None
        self._started = 0.0

    def __enter__(self):
        self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.seconds = time.perf_counter() - self._started
        self.child.observe(self.seconds)
        return False


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Add value to the labelled child of counter

    Zero increments are skipped so that no empty series is created.
    """
    if value:
        counter.labels(**labels).inc(value)


def record_dataset_load(summary: LoadSummary) -> None:
    """
    Record the outcome of one dataset read

    Args:
        summary: Summary produced by the dataset reader
    """
    increment_counter(records_total, summary.records_loaded, entity=summary.entity, status="loaded")
    increment_counter(records_total, summary.rejected_count, entity=summary.entity, status="rejected")
    increment_counter(records_total, summary.duplicate_count, entity=summary.entity, status="duplicate")


def record_load_failure(entity: str, error: Exception) -> None:
    """Count a fatal load error for an entity."""
    increment_counter(load_failures_total, entity=entity, error_type=type(error).__name__)
