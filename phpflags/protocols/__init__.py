"""Protocol definitions for phpflags providers.

These use typing.Protocol with @runtime_checkable so they support both
static type checking and runtime isinstance() checks.
"""

from .provider_protocol import RuntimeProviderProtocol


__all__ = ["RuntimeProviderProtocol"]
