"""Environment-driven settings for phpflags."""

from collections.abc import Mapping
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


PHP_CONFIG_ENV_VAR = "PHP_CONFIG"
SNAPSHOT_ENV_PREFIX = "PHPFLAGS_"


class LocatorSettings(BaseSettings):
    """Settings consulted when locating the php-config executable.

    The override is read fresh each time the model is instantiated, the
    locator creates a new instance on every lookup.
    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_ignore_empty=True,
        extra="ignore",
    )

    php_config: Path | None = Field(
        default=None,
        alias=PHP_CONFIG_ENV_VAR,
        description="Exact path of the php-config executable, disables PATH search",
    )

    @classmethod
    def from_environ(
        cls, environ: Mapping[str, str] | None = None
    ) -> "LocatorSettings":
        """Read the settings from ``environ``, or the process environment if None."""
        if environ is None:
            return cls()
        # model_validate skips the settings sources, only ``environ`` is read
        return cls.model_validate(
            {PHP_CONFIG_ENV_VAR: environ.get(PHP_CONFIG_ENV_VAR) or None}
        )


class SnapshotSettings(BaseSettings):
    """Snapshot values captured from ``PHPFLAGS_*`` environment variables.

    Used for cross-compilation and sandboxed builds where php-config cannot
    run. ``PHPFLAGS_INCLUDES`` holds a comma separated list of include
    directories, ``PHPFLAGS_DEFINES`` a comma separated list of ``NAME`` or
    ``NAME=VALUE`` entries.
    """

    model_config = SettingsConfigDict(
        env_prefix=SNAPSHOT_ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
    )

    includes: str | None = None
    defines: str | None = None

    @classmethod
    def from_environ(
        cls, environ: Mapping[str, str] | None = None
    ) -> "SnapshotSettings":
        """Read the settings from ``environ``, or the process environment if None."""
        if environ is None:
            return cls()
        prefix_len = len(SNAPSHOT_ENV_PREFIX)
        return cls.model_validate(
            {
                key[prefix_len:].lower(): value
                for key, value in environ.items()
                if key.upper().startswith(SNAPSHOT_ENV_PREFIX)
            }
        )

    def to_values(self) -> dict[str, str]:
        """Return the snapshot mapping, leaving out unset keys."""
        return self.model_dump(exclude_none=True)
