"""
Framework neutral request/response pair handed to the callback handler.

Host integrations translate their native request into a
:class:`CallbackRequest` and copy a written :class:`CallbackResponse` back.
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qs, urlsplit

from requests.structures import CaseInsensitiveDict

QueryType = Mapping[str, Any]


class CallbackRequest:
    """An inbound HTTP request.

    ``query`` must already be parsed by the host. ``None`` means it was not,
    which the callback handler reports as an error. Values may be plain
    strings or lists of strings as produced by :func:`urllib.parse.parse_qs`.
    """

    def __init__(
        self,
        method: str = "GET",
        path: str = "/",
        query: QueryType | None = None,
        headers: Mapping[str, str] | None = None,
        body: bytes = b"",
        original_path: str | None = None,
    ) -> None:
        self.method = method.upper()
        self.path = path
        self.original_path = original_path
        self.query = query
        self.headers: CaseInsensitiveDict = CaseInsensitiveDict(headers or {})
        self.body = body

    @classmethod
    def from_url(cls, method: str, url: str, **kwargs: Any) -> "CallbackRequest":
        """Build a request from a path with query string, parsing the query."""
        parts = urlsplit(url)
        query = {k: v[0] for k, v in parse_qs(parts.query, keep_blank_values=True).items()}
        return cls(method=method, path=parts.path, query=query, **kwargs)

    def get(self, name: str) -> str | None:
        """Return the first value of query parameter ``name``."""
        if self.query is None or name not in self.query:
            return None
        value = self.query[name]
        if isinstance(value, (list, tuple)):
            return value[0] if value else None
        return value

    @property
    def effective_path(self) -> str:
        return self.original_path or self.path

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", "replace")

    def __repr__(self) -> str:
        return f"<CallbackRequest {self.method} {self.effective_path}>"


class CallbackResponse:
    """Response written by the callback handler.

    ``written`` stays False when the handler consumed a request without
    answering it, the host integration decides what to send then.
    """

    def __init__(self) -> None:
        self.status_code = 200
        self.status_message = "OK"
        self.headers: CaseInsensitiveDict = CaseInsensitiveDict()
        self.body = b""
        self.written = False

    def set_status(self, code: int, message: str = "") -> None:
        self.status_code = code
        self.status_message = message
        self.written = True

    def write(self, data: str | bytes) -> None:
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.body += data
        self.written = True
