"""Base model for all phpflags Pydantic models.

This module provides a base model class that enforces consistent
validation behavior across all phpflags models.
"""

from pydantic import BaseModel, ConfigDict


class PhpFlagsBaseModel(BaseModel):
    """Base model class for all phpflags Pydantic models.

    Models are immutable once built and reject unknown fields. String values
    are kept verbatim, snapshot segments are split exactly as given.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        str_strip_whitespace=False,
    )
