"""Mutable view of an outgoing request used during API version insertion."""

from dataclasses import dataclass, field
from urllib.parse import parse_qsl, quote, urlencode

import httpx


def _split_path(raw_path: str) -> list[str]:
    return [segment for segment in raw_path.split("/") if segment]


def _encode_pair(name: str, value: str) -> str:
    return f"{quote(name, safe='')}={quote(value, safe='')}"


@dataclass
class RequestRepresentation:
    """Builder-like representation of one outgoing HTTP request.

    Path segments are kept exactly as they appear in the URL (percent-encoded),
    without separators. Query parameters and headers are ordered multimaps
    stored as lists of ``(name, value)`` pairs.

    When created from an existing request, the original raw path and query are
    kept as sent. Changes made through ``add_header``, ``add_query_param`` and
    ``insert_path_segment`` are recorded, and ``apply_to`` writes back only
    those changes.

    A representation belongs to a single in-flight request and is never shared.
    """

    method: str = "GET"
    path_segments: list[str] = field(default_factory=list)
    query: list[tuple[str, str]] = field(default_factory=list)
    headers: list[tuple[str, str]] = field(default_factory=list)
    original_path: str | None = field(default=None, repr=False)
    original_query: str | None = field(default=None, repr=False)
    _path_modified: bool = field(default=False, init=False, repr=False)
    _added_query: list[tuple[str, str]] = field(default_factory=list, init=False, repr=False)
    _added_headers: list[tuple[str, str]] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def from_path(cls, path: str, method: str = "GET") -> "RequestRepresentation":
        """Create a representation from a path, optionally carrying a query string.

        Args:
            path: Request target such as ``/path`` or ``/path?a=1``
            method: HTTP method

        Returns:
            RequestRepresentation with the parsed segments and query
        """
        raw_path, _, query = path.partition("?")
        return cls(
            method=method.upper(),
            path_segments=_split_path(raw_path),
            query=parse_qsl(query, keep_blank_values=True),
            original_path=raw_path or "/",
            original_query=query,
        )

    @classmethod
    def from_httpx(cls, request: httpx.Request) -> "RequestRepresentation":
        """Create a representation from a finalized httpx request.

        Args:
            request: Request whose URL, query and headers are already merged

        Returns:
            RequestRepresentation mirroring the request
        """
        raw_path, _, query = request.url.raw_path.decode("ascii").partition("?")
        encoding = request.headers.encoding
        return cls(
            method=request.method,
            path_segments=_split_path(raw_path),
            query=parse_qsl(query, keep_blank_values=True),
            headers=[(key.decode(encoding), value.decode(encoding)) for key, value in request.headers.raw],
            original_path=raw_path,
            original_query=query,
        )

    @property
    def path(self) -> str:
        """Render the path with ``/`` separators (``/`` when there are no segments).

        An unmodified path is returned exactly as it was received.
        """
        if self.original_path is not None and not self._path_modified:
            return self.original_path
        path = "/" + "/".join(self.path_segments)
        if self.original_path and self.original_path.endswith("/") and _split_path(self.original_path):
            path += "/"
        return path

    @property
    def query_string(self) -> str:
        """Render the query as ``key=value`` pairs joined by ``&``.

        Parameters added after creation are appended to the original raw query.
        """
        if self.original_query is None:
            return urlencode(self.query, quote_via=quote)
        added = [_encode_pair(name, value) for name, value in self._added_query]
        return "&".join(([self.original_query] if self.original_query else []) + added)

    @property
    def target(self) -> str:
        """Render path plus query string, as sent on the request line."""
        query_string = self.query_string
        if not query_string:
            return self.path
        return f"{self.path}?{query_string}"

    def add_header(self, name: str, value: str) -> None:
        """Append a header entry without touching existing entries of that name."""
        self.headers.append((name, value))
        self._added_headers.append((name, value))

    def get_headers(self, name: str) -> list[str]:
        """Return all values of a header, compared case-insensitively."""
        lowered = name.lower()
        return [value for key, value in self.headers if key.lower() == lowered]

    def add_query_param(self, name: str, value: str) -> None:
        """Append a query parameter after any existing parameters."""
        self.query.append((name, value))
        self._added_query.append((name, value))

    def insert_path_segment(self, index: int, segment: str) -> None:
        """Insert a segment at ``index``, shifting later segments right."""
        self.path_segments.insert(index, segment)
        self._path_modified = True

    def apply_to(self, request: httpx.Request) -> httpx.Request:
        """Write the recorded changes back onto an httpx request.

        Only what was changed is written: an untouched path or query keeps its
        raw bytes, and existing headers keep their names and order. The body,
        method and extensions are left alone.

        Args:
            request: The request this representation was created from

        Returns:
            The same request, updated in place
        """
        changes: dict[str, str | bytes] = {}
        if self._path_modified:
            changes["path"] = self.path
        if self._added_query:
            changes["query"] = self.query_string.encode("ascii")
        if changes:
            request.url = request.url.copy_with(**changes)

        if self._added_headers:
            request.headers = httpx.Headers([*request.headers.raw, *self._added_headers])
        return request
