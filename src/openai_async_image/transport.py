from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Final, Generic, Mapping, Optional, TypeVar

import aiohttp
from yarl import URL

from .errors import HttpStatusError, MalformedResponseError

__all__: Final = ["Response", "Transport", "HttpTransport", "parse_base_url"]

_LOG = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Response(Generic[T]):
    """A decoded HTTP response."""

    value: T
    status: int = 200
    headers: Mapping[str, str] = field(default_factory=dict)


class Transport(ABC):
    """Async interface for sending JSON requests to a fixed base URL.

    Sub-classes **must** implement :meth:`post`. A default no-op
    :meth:`aclose` is provided so callers can always ``await
    transport.aclose()``.
    """

    @abstractmethod
    async def post(
        self,
        path: str,
        body: Any,
        headers: Mapping[str, str],
        *,
        reader: Callable[[Any], T],
    ) -> Response[T]:
        """POST *body* as JSON to *path* and decode the reply with *reader*.

        Raises on network failure, non-success status, or a body that
        *reader* cannot decode.
        """

    async def aclose(self) -> None:
        """Release any open resources (optional)."""
        return None


def parse_base_url(raw: str) -> Optional[URL]:
    """Return *raw* as an absolute http(s) URL, or ``None`` if it is not one."""
    if not isinstance(raw, str) or not raw.strip() or raw != raw.strip():
        return None
    try:
        url = URL(raw)
    except (TypeError, ValueError):
        return None
    if url.scheme not in ("http", "https") or not url.host:
        return None
    # Request paths are appended to the base URL.
    if url.query_string or url.fragment:
        return None
    return url


def _error_message(status: int, text: str) -> str:
    """Pull ``error.message`` out of an OpenAI-style error body if present."""
    try:
        payload = json.loads(text)
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        if isinstance(error, str):
            return error
    return text.strip() or f"request failed with status {status}"


class HttpTransport(Transport):
    """aiohttp-backed transport bound to a single base URL.

    The :class:`aiohttp.ClientSession` is created lazily on the first request
    so the transport can be built outside a running event loop. A session
    passed in by the caller is used as-is and never closed here.
    """

    def __init__(
        self,
        base_url: URL | str,
        *,
        timeout: Optional[float] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        self.base_url = URL(base_url) if isinstance(base_url, str) else base_url
        self._timeout = aiohttp.ClientTimeout(total=timeout) if timeout else None
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @property
    def timeout(self) -> Optional[float]:
        """Total request timeout in seconds, or ``None`` for aiohttp's default."""
        return self._timeout.total if self._timeout is not None else None

    def url_for(self, path: str) -> str:
        base = str(self.base_url.with_query(None).with_fragment(None)).rstrip("/")
        if not path:
            return base
        return f"{base}/{path.lstrip('/')}"

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            if self._timeout is not None:
                self._session = aiohttp.ClientSession(timeout=self._timeout)
            else:
                self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def post(
        self,
        path: str,
        body: Any,
        headers: Mapping[str, str],
        *,
        reader: Callable[[Any], T],
    ) -> Response[T]:
        url = self.url_for(path)
        session = self._get_session()
        _LOG.debug("POST %s", url)

        async with session.post(url, json=body, headers=dict(headers)) as rsp:
            raw = await rsp.read()
            status = rsp.status
            rsp_headers = dict(rsp.headers)

        if not 200 <= status < 300:
            text = raw.decode("utf-8", errors="replace")
            message = _error_message(status, text)
            _LOG.debug("POST %s failed with status %s: %s", url, status, message)
            raise HttpStatusError(status, message, text)

        try:
            # Undecodable bytes raise UnicodeDecodeError, a ValueError.
            payload = json.loads(raw)
        except ValueError as exc:
            raise MalformedResponseError(f"Response body is not JSON: {exc}") from exc

        return Response(value=reader(payload), status=status, headers=rsp_headers)

    async def aclose(self) -> None:
        """Close the HTTP session if this transport created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
