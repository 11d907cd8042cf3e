"""CLI helper utilities."""

from .parameters import FromEnvOption, OutputFormat, OutputFormatOption, SnapshotOption


__all__ = ["FromEnvOption", "OutputFormat", "OutputFormatOption", "SnapshotOption"]
