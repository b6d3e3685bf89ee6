"""Validation models and utilities for word-stems tools."""

from typing import Annotated

from pydantic import Field
from pydantic.functional_validators import AfterValidator


# Frequency listing limits
DEFAULT_FREQUENCY_LIMIT = 100
MAX_FREQUENCY_LIMIT = 1000


def validate_not_blank(value: str) -> str:
    """Reject whitespace-only text but keep it unchanged otherwise."""
    if not value.strip():
        raise ValueError("Value cannot be empty or whitespace only")
    return value


InputPath = Annotated[
    str,
    AfterValidator(validate_not_blank),
    Field(
        ...,
        min_length=1,
        description="Path to a UTF-8 text file to tokenize and count by word stem.",
    ),
]

InputText = Annotated[
    str,
    AfterValidator(validate_not_blank),
    Field(
        ...,
        min_length=1,
        description="Text to tokenize and count by word stem. Example: 'Добрым людям добро!'",
    ),
]

FrequencyLimit = Annotated[
    int,
    Field(
        default=DEFAULT_FREQUENCY_LIMIT,
        ge=1,
        le=MAX_FREQUENCY_LIMIT,
        description=f"Maximum number of stem frequencies to return (1-{MAX_FREQUENCY_LIMIT}).",
    ),
]
