"""Protocol definition for runtime flag providers."""

from typing import Protocol, runtime_checkable

from phpflags.models.description import DefinePair, IncludePath


@runtime_checkable
class RuntimeProviderProtocol(Protocol):
    """Protocol for objects that answer include and define queries."""

    def get_includes(self) -> list[IncludePath]:
        """Return the compiler include paths, in the order reported.

        Raises:
            PhpFlagsError: If the paths cannot be determined
        """
        ...

    def get_defines(self) -> list[DefinePair]:
        """Return the preprocessor defines as (name, value) pairs.

        Raises:
            PhpFlagsError: If the defines cannot be determined
        """
        ...
