"""Rendering of API version values into their wire representation."""

from typing import Protocol


class VersionFormatter(Protocol):
    """Callable converting an opaque version value into a string.

    Implementations must be deterministic. Exceptions raised by a formatter
    propagate unchanged to the caller of ``ApiVersionInserter.insert``.
    """

    def __call__(self, version: object) -> str: ...


def default_version_formatter(version: object) -> str:
    """Render a version using its natural string form (``1.2`` -> ``"1.2"``)."""
    return str(version)
