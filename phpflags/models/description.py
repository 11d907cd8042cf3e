"""Runtime description models.

A runtime description says where the PHP build configuration comes from:
either the ``php-config`` executable, run on demand, or a snapshot of
key/value pairs captured earlier from the environment or a file.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any, Literal, TypeAlias

from pydantic import Field, TypeAdapter

from phpflags.models.base import PhpFlagsBaseModel


# Type aliases for provider results
IncludePath: TypeAlias = Path
DefinePair: TypeAlias = tuple[str, str]  # (name, value)


class CommandBacked(PhpFlagsBaseModel):
    """Configuration is obtained by running ``php-config``."""

    source: Literal["command"] = "command"

    def get_key(self, key: str) -> str | None:
        """Command-backed descriptions hold no pre-fetched values."""
        return None


class SnapshotBacked(PhpFlagsBaseModel):
    """Configuration captured ahead of time as a string mapping."""

    source: Literal["snapshot"] = "snapshot"
    values: Mapping[str, str] = Field(
        default_factory=dict,
        description="Snapshot keys such as 'includes' and 'defines'",
    )

    def get_key(self, key: str) -> str | None:
        """Return the snapshot value for ``key`` or None when absent."""
        return self.values.get(key)

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "SnapshotBacked":
        """Build a snapshot description from any string mapping."""
        return cls(values=dict(values))


RuntimeDescription: TypeAlias = Annotated[
    CommandBacked | SnapshotBacked, Field(discriminator="source")
]

_description_adapter: TypeAdapter[CommandBacked | SnapshotBacked] = TypeAdapter(
    RuntimeDescription
)


def parse_description(data: Any) -> CommandBacked | SnapshotBacked:
    """Validate plain data (e.g. loaded JSON) into a runtime description.

    Raises:
        pydantic.ValidationError: If ``data`` matches neither variant
    """
    return _description_adapter.validate_python(data)
