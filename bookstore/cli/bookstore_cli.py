"""
Command-line interface for the bookstore reports.

Usage:
    python -m bookstore.cli.bookstore_cli [report options] [--config <file>] [options]
"""

import argparse
import sys

from dotenv import load_dotenv

from bookstore.batch import Dataset, DataLoader
from bookstore.config import BookstoreSettings, load_settings
from bookstore.core.errors import LoadError
from bookstore.observability.logger import get_logger, log_operation, setup_logger
from bookstore.observability.metrics import write_metrics
from bookstore.reports import BooksReport, CustomersReport, PurchasesReport, Report


logger = get_logger(__name__)


def build_reports(args: argparse.Namespace, dataset: Dataset) -> list[Report]:
    """
    Build the reports selected on the command line.

    Args:
        args: Command-line arguments
        dataset: Loaded data

    Returns:
        Reports in customers, books, purchases order
    """
    reports: list[Report] = []
    if args.customers:
        reports.append(CustomersReport(dataset, by_join_date=args.by_join_date, descending=args.descending))
    if args.books:
        reports.append(BooksReport(dataset, by_author=args.by_author, descending=args.descending))
    if args.purchases:
        reports.append(
            PurchasesReport(
                dataset,
                customer_id=args.customer_id,
                by_last_name=args.by_last_name,
                by_title=args.by_title,
                descending=args.descending,
                total=args.total,
            )
        )
    return reports


def process_command(args: argparse.Namespace, settings: BookstoreSettings) -> int:
    """
    Load the data and generate the requested reports.

    Args:
        args: Command-line arguments
        settings: Resolved settings

    Returns:
        Process exit code
    """
    logger.info(f"Data directory: {settings.data_dir}")

    try:
        with log_operation("Loading bookstore data", logger=logger, data_dir=str(settings.data_dir)):
            dataset = DataLoader(settings).load()
    except LoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    reports = build_reports(args, dataset)
    if not reports:
        logger.info("No reports requested")
        return 0

    for report in reports:
        logger.debug(f"generating the {report.TITLE}")
        report.print(sys.stdout)
        try:
            path = report.write(settings.output_dir)
        except OSError as e:
            logger.error(f"Cannot write {report.REPORT_FILENAME}: {e}")
            print(f"Error: cannot write {report.REPORT_FILENAME}: {e}", file=sys.stderr)
            return 1
        logger.info(f"Wrote {report.TITLE} to {path}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookstore",
        description="Load bookstore customer, book and purchase data and print reports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Customers report sorted by joined date, newest first
  bookstore -c -j -d --data-dir data

  # One customer's purchases sorted by title, with the total value
  bookstore -p -C 8479 -t -T

  # All reports, JSON logs, metrics textfile for node_exporter
  bookstore -c -b -p --log-format json --metrics-file /var/lib/node_exporter/bookstore.prom
        """
    )

    # Report selection
    parser.add_argument("-c", "--customers", action="store_true", help="Print the customers report")
    parser.add_argument("-b", "--books", action="store_true", help="Print the books report")
    parser.add_argument("-p", "--purchases", action="store_true", help="Print the purchases report")

    # Report options
    parser.add_argument(
        "-C", "--customer-id",
        type=int,
        default=None,
        help="Only include purchases of this customer id"
    )
    parser.add_argument("-j", "--by-join-date", action="store_true", help="Sort customers by joined date")
    parser.add_argument("-a", "--by-author", action="store_true", help="Sort books by author")
    parser.add_argument("-l", "--by-last-name", action="store_true", help="Sort purchases by customer last name")
    parser.add_argument("-t", "--by-title", action="store_true", help="Sort purchases by book title")
    parser.add_argument("-d", "--descending", action="store_true", help="Sort in descending order")
    parser.add_argument("-T", "--total", action="store_true", help="Print the total value of the purchases")

    # Configuration
    parser.add_argument("--config", default=None, help="Path to a YAML configuration file")
    parser.add_argument("--data-dir", default=None, help="Directory holding the data files")
    parser.add_argument("--output-dir", default=None, help="Directory receiving the report files")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level, case-insensitive (default: INFO or $LOG_LEVEL)"
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "text"],
        help="Log format (default: text or $LOG_FORMAT)"
    )
    parser.add_argument("--metrics-file", default=None, help="Write Prometheus metrics to this textfile")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv()

    try:
        settings = load_settings(
            args.config,
            data_dir=args.data_dir,
            output_dir=args.output_dir,
            log_level=args.log_level,
            log_format=args.log_format,
            metrics_file=args.metrics_file,
        )
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logger(level=settings.log_level, format_type=settings.log_format, log_file=settings.log_file)
    logger.debug(f"Input args: {argv if argv is not None else sys.argv[1:]}")

    try:
        exit_code = process_command(args, settings)
    finally:
        if settings.metrics_file:
            write_metrics(settings.metrics_file)

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
