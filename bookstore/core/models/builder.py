"""
Base class for the fluent record builders.
"""

from typing import Any

from pydantic import BaseModel, ValidationError

from bookstore.core.errors import IncompleteRecord


class RecordBuilder:
    """
    Collects attribute values and builds a frozen record model.

    Subclasses set `model` and expose one `set_*` method per attribute,
    each returning the builder so calls can be chained.
    """

    model: type[BaseModel]

    def __init__(self, **values: Any):
        self._values: dict[str, Any] = dict(values)

    def _set(self, name: str, value: Any):
        self._values[name] = value
        return self

    def build(self) -> Any:
        """
        Build the record.

        Raises:
            IncompleteRecord: If an attribute is missing or rejected by the model
        """
        try:
            return self.model(**self._values)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise IncompleteRecord(self.model.__name__, problems) from e
