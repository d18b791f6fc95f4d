"""Common schemas used across the application."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire.

    Python code uses snake_case attributes; JSON bodies use the camelCase
    names the browser form posts (``firstName``, ``zipCode``...). Both
    spellings are accepted on input.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordModel(CamelModel):
    """Immutable record; changes go through ``model_copy(update=...)``."""
    model_config = ConfigDict(frozen=True)
