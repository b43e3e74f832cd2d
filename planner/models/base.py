"""Base model shared by every record exchanged with callers."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """A model that serializes with camelCase keys.

    Existing callers send and expect `paceLabel`, `repetitionCount`, etc.
    Python code uses the snake_case field names; both spellings are accepted
    on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
