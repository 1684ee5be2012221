"""Placement strategies deciding where a formatted version goes on a request.

Exactly one strategy is active per ``ApiVersionInserter``:

| Strategy | Wire location | Can fail at request time |
|----------|---------------|--------------------------|
| `HeaderPlacement` | Request header | No |
| `QueryParamPlacement` | Query parameter | No |
| `PathSegmentPlacement` | Path segment at an index | Yes, when the index is past the end of the path |

Header and query placements are additive: existing entries with the same
name are kept, so applying a strategy twice produces two entries.

## PathSegmentPlacement Example

```python
from api_version_client.request import RequestRepresentation
from api_version_client.versioning.placement import PathSegmentPlacement

request = RequestRepresentation.from_path("/users/42")
PathSegmentPlacement(0).apply("v2", request)
assert request.path == "/v2/users/42"
```
"""

from dataclasses import dataclass

from api_version_client.request import RequestRepresentation
from api_version_client.versioning.exceptions import (
    InserterConfigurationError,
    PathSegmentOutOfRangeError,
)


def _require_name(kind: str, name: object) -> None:
    if not isinstance(name, str) or not name:
        raise InserterConfigurationError(f"{kind} name must be a non-empty string, got {name!r}")


@dataclass(frozen=True)
class HeaderPlacement:
    """Send the version as a request header."""

    name: str

    def __post_init__(self) -> None:
        _require_name("Header", self.name)

    def apply(self, formatted: str, request: RequestRepresentation) -> None:
        request.add_header(self.name, formatted)

    def describe(self) -> str:
        return f"header '{self.name}'"


@dataclass(frozen=True)
class QueryParamPlacement:
    """Send the version as a query parameter appended after existing ones."""

    name: str

    def __post_init__(self) -> None:
        _require_name("Query parameter", self.name)

    def apply(self, formatted: str, request: RequestRepresentation) -> None:
        request.add_query_param(self.name, formatted)

    def describe(self) -> str:
        return f"query parameter '{self.name}'"


@dataclass(frozen=True)
class PathSegmentPlacement:
    """Insert the version as a path segment at a zero-based index.

    An index equal to the number of existing segments appends the version as
    the last segment. Anything beyond that fails for the request.

    Args:
        index: Zero-based segment position, validated to be ``>= 0``
    """

    index: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a meaningful index
        if not isinstance(self.index, int) or isinstance(self.index, bool):
            raise InserterConfigurationError(f"Path segment index must be an integer, got {self.index!r}")
        if self.index < 0:
            raise InserterConfigurationError(f"Path segment index must be >= 0, got {self.index}")

    def apply(self, formatted: str, request: RequestRepresentation) -> None:
        """Insert the formatted version into the request path.

        Args:
            formatted: The version string to insert
            request: Request representation to modify

        Raises:
            PathSegmentOutOfRangeError: If the index exceeds the number of segments
        """
        if self.index > len(request.path_segments):
            raise PathSegmentOutOfRangeError(request.path, self.index)
        request.insert_path_segment(self.index, formatted)

    def describe(self) -> str:
        return f"path segment {self.index}"


InsertionStrategy = HeaderPlacement | QueryParamPlacement | PathSegmentPlacement
