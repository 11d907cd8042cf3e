"""Adapters for external tools."""

from .php_config_adapter import (
    INCLUDES_FLAG,
    PhpConfigAdapter,
    create_php_config_adapter,
    php_config,
)


__all__ = [
    "INCLUDES_FLAG",
    "PhpConfigAdapter",
    "create_php_config_adapter",
    "php_config",
]
