"""
Base client for external service clients.

Provides: aiohttp session lifecycle, a single-shot GET returning the raw body
bytes, structured logging, and the error hierarchy every failure path maps to.
Lookups are one request, one response: no caching, no retry.
"""

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from typing import Any

import aiohttp
from pydantic import BaseModel

logger = logging.getLogger("oclc_classify.data_sources")


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ClientConfig(BaseModel):
    """Per-client transport settings."""

    timeout_seconds: float | None = None  # None = no client-side timeout


# ---------------------------------------------------------------------------
# Request context (for structured logging)
# ---------------------------------------------------------------------------


class RequestContext(BaseModel):
    """Metadata attached to every outgoing request for logging."""

    source: str  # e.g. "oclc_classify"
    method: str  # e.g. "lookup"
    params: dict[str, Any] = {}


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ClassifyError(Exception):
    """Base exception for classification lookup failures."""

    def __init__(self, source: str, message: str, status_code: int | None = None):
        self.source = source
        self.status_code = status_code
        super().__init__(f"[{source}] {message}")


class NoInputError(ClassifyError):
    """Response code 100: the request carried no identifier."""

    pass


class InvalidInputError(ClassifyError):
    """Response code 101: the identifier failed the service's syntax check."""

    pass


class UnexpectedResponseCodeError(ClassifyError):
    """The document carried a response code this client does not know."""

    def __init__(self, source: str, code: int):
        self.code = code
        super().__init__(source, f"Unexpected response code: {code}")


class UnexpectedError(ClassifyError):
    """The document lacks fields its response code requires."""

    pass


class XmlParsingError(ClassifyError):
    """The response body is not a well-formed Classify document."""

    pass


class TransportError(ClassifyError):
    """The HTTP exchange failed (connection, timeout, or error status)."""

    pass


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------


class BaseClient(ABC):
    """
    Abstract base for service clients.

    Subclasses implement `_source_name` and their own typed methods that
    call `_rest_get()`.
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig()
        self._session: aiohttp.ClientSession | None = None

    @property
    @abstractmethod
    def _source_name(self) -> str:
        """Identifier for this data source, e.g. 'oclc_classify'."""
        ...

    # -- Session management --------------------------------------------------

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()

    # -- Core request ----------------------------------------------------------

    async def _request(
        self,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        context: RequestContext | None = None,
    ) -> bytes:
        """
        Make one HTTP GET and return the raw response body.

        The body is returned undecoded; the document parser honours the
        encoding the document itself declares.

        Parameters
        ----------
        url : str
            Full URL.
        params : dict, optional
            Query string parameters.
        context : RequestContext, optional
            Logging context. Defaults to one carrying `params`.

        Raises
        ------
        TransportError
            On connection failure, timeout, or an HTTP error status.
        """
        ctx = context or RequestContext(
            source=self._source_name, method="unknown", params=params or {}
        )
        start = time.monotonic()

        try:
            session = await self._get_session()

            logger.info(
                "Request [%s.%s] url=%s params=%s",
                ctx.source,
                ctx.method,
                url,
                ctx.params,
            )

            async with session.get(url, params=params) as resp:
                status = resp.status
                body = await resp.read()

        except asyncio.TimeoutError:
            elapsed = time.monotonic() - start
            logger.warning(
                "Timeout [%s.%s] elapsed=%.1fs", ctx.source, ctx.method, elapsed
            )
            raise TransportError(ctx.source, f"Timeout after {elapsed:.1f}s")

        except aiohttp.ClientError as e:
            logger.warning("Connection error [%s.%s]: %s", ctx.source, ctx.method, e)
            raise TransportError(ctx.source, f"Connection error: {e}") from e

        if status >= 400:
            snippet = body[:500].decode("utf-8", errors="replace")
            logger.warning(
                "HTTP %d from %s.%s: %s",
                status,
                ctx.source,
                ctx.method,
                snippet[:200],
            )
            raise TransportError(
                ctx.source,
                f"HTTP {status}: {snippet}",
                status_code=status,
            )

        elapsed = time.monotonic() - start
        logger.info(
            "Success [%s.%s] status=%d bytes=%d elapsed=%.2fs",
            ctx.source,
            ctx.method,
            status,
            len(body),
            elapsed,
        )
        return body

    # -- Convenience methods for subclasses ----------------------------------

    async def _rest_get(
        self,
        url: str,
        params: dict[str, Any],
        *,
        context: RequestContext | None = None,
    ) -> bytes:
        """Convenience wrapper for REST GET requests."""
        return await self._request(url, params=params, context=context)
