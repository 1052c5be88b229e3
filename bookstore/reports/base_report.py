"""
Base report interface for all bookstore reports.

A report renders a loaded Dataset into lines of fixed-width text that can be
printed to any text stream or written to the report's own file.
"""

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO

from bookstore.batch import Dataset


def truncate(text: str, width: int) -> str:
    """Cut text to at most width characters."""
    return text if len(text) <= width else text[:width]


class Report(ABC):
    """
    Abstract base class for reports.

    Subclasses set TITLE and REPORT_FILENAME and implement render().
    """

    TITLE: str
    REPORT_FILENAME: str

    def __init__(self, dataset: Dataset, descending: bool = False):
        """
        Initialize report.

        Args:
            dataset: Loaded data to report on
            descending: Reverse the sort order of the rows
        """
        self.dataset = dataset
        self.descending = descending

    @abstractmethod
    def render(self) -> list[str]:
        """Return the report as a list of lines without terminators."""
        pass

    def print(self, out: TextIO | None = None) -> None:
        """Print the report to out (stdout by default)."""
        out = out or sys.stdout
        for line in self.render():
            out.write(line + "\n")

    def write(self, output_dir: str | Path) -> Path:
        """
        Write the report to REPORT_FILENAME inside output_dir.

        Returns:
            Path of the written file
        """
        directory = Path(output_dir)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / self.REPORT_FILENAME
        with open(path, "w", encoding="utf-8") as out:
            self.print(out)
        return path

    def _heading(self, header: str) -> list[str]:
        return [self.TITLE, "-" * len(header), header, "-" * len(header)]
