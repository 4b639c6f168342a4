"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for comment streams value objects.

    Value objects are frozen and compared by value, so two page contexts
    describing the same render are interchangeable.
    """

    model_config = ConfigDict(frozen=True)
