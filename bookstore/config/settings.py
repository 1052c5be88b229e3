"""
Runtime settings for the bookstore loader.

Settings come from, in increasing precedence: model defaults, a YAML file,
environment variables and explicit overrides (usually CLI arguments).

Expected YAML format:
```yaml
bookstore:
  data_dir: data
  customers_file: customers.dat
  books_file: books.dat
  purchases_file: purchases.dat
  field_delimiter: "|"
  output_dir: reports
  log_level: INFO
  log_format: text
```
"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

# Environment variable -> settings field
ENV_OVERRIDES = {
    "BOOKSTORE_DATA_DIR": "data_dir",
    "BOOKSTORE_OUTPUT_DIR": "output_dir",
    "BOOKSTORE_LOG_FILE": "log_file",
    "LOG_LEVEL": "log_level",
    "LOG_FORMAT": "log_format",
}


class BookstoreSettings(BaseModel):
    """
    Where the data files live and how a run is logged.

    Attributes:
        data_dir: Directory holding the input files
        customers_file: Customer file name, relative to data_dir
        books_file: Book file name, relative to data_dir
        purchases_file: Purchase file name, relative to data_dir
        field_delimiter: Literal field separator
        encoding: Text encoding of the input files
        output_dir: Directory receiving the report files
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_format: "text" or "json"
        log_file: Log to this file instead of stderr
        metrics_file: Write Prometheus metrics to this textfile after a run
    """

    data_dir: Path = Path(".")
    customers_file: str = "customers.dat"
    books_file: str = "books.dat"
    purchases_file: str = "purchases.dat"
    field_delimiter: str = Field("|", min_length=1)
    encoding: str = "utf-8"
    output_dir: Path = Path(".")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: str | None = None
    metrics_file: str | None = None

    def path_for(self, entity: str) -> Path:
        """
        Resolve the input file of an entity.

        Args:
            entity: "customer", "book" or "purchase"

        Raises:
            ValueError: If the entity is unknown
        """
        file_names = {
            "customer": self.customers_file,
            "book": self.books_file,
            "purchase": self.purchases_file,
        }
        if entity not in file_names:
            raise ValueError(f"Unknown entity: {entity}")
        return self.data_dir / file_names[entity]


def load_settings(config_path: str | Path | None = None, **overrides: Any) -> BookstoreSettings:
    """
    Build settings from a YAML file, the environment and overrides.

    Args:
        config_path: Optional YAML file with a top level 'bookstore' section
        **overrides: Explicit values; None values are ignored

    Returns:
        Validated settings

    Raises:
        FileNotFoundError: If config_path is given but does not exist
        ValueError: If the file or the resulting values are invalid
    """
    values: dict[str, Any] = {}

    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(path) as f:
            config = yaml.safe_load(f) or {}

        section = (config.get("bookstore") or {}) if isinstance(config, dict) else None
        if not isinstance(section, dict):
            raise ValueError("Configuration file 'bookstore' section must be a mapping")
        values.update(section)

    for env_name, field_name in ENV_OVERRIDES.items():
        env_value = os.getenv(env_name)
        if env_value:
            values[field_name] = env_value

    values.update({k: v for k, v in overrides.items() if v is not None})

    if isinstance(values.get("log_level"), str):
        values["log_level"] = values["log_level"].upper()

    try:
        return BookstoreSettings(**values)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
