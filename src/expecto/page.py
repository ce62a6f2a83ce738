"""Page-automation handles that tests drive through awaitables.

The runner does not special-case pages: ``await page.goto(url)`` and
``await page.evaluate(fn)`` are ordinary deferred values. :class:`HttpPage`
is a lightweight handle that fetches documents over HTTP and evaluates
Python callables against them; it does not execute scripts.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar

import httpx

T = TypeVar("T")


@dataclass(frozen=True)
class PageDocument:
    """The currently loaded document of a page."""

    url: str
    status_code: int
    text: str
    headers: dict[str, str] = field(default_factory=dict)


class Page(Protocol):
    """Asynchronous page-automation handle."""

    async def goto(self, url: str) -> Any: ...

    async def evaluate(self, fn: Callable[[PageDocument], T]) -> T: ...

    async def end(self) -> None: ...


class HttpPage:
    """Page handle backed by ``httpx.AsyncClient``.

    Usable as an async context manager::

        async with HttpPage() as page:
            await page.goto("https://example.com")
            text = await page.evaluate(lambda doc: doc.text)
    """

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._headers = headers or {}
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None
        self.document: PageDocument | None = None

    async def __aenter__(self) -> HttpPage:
        self._client()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.end()

    def _client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                headers=self._headers,
                timeout=httpx.Timeout(self._timeout, connect=self._timeout),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._http_client

    async def goto(self, url: str) -> PageDocument:
        """Load ``url`` and make it the current document."""
        response = await self._client().get(url)
        response.raise_for_status()
        self.document = PageDocument(
            url=str(response.url),
            status_code=response.status_code,
            text=response.text,
            headers=dict(response.headers),
        )
        return self.document

    async def evaluate(self, fn: Callable[[PageDocument], T]) -> T:
        """Call ``fn`` with the current document and return its result."""
        if self.document is None:
            msg = "evaluate() called before goto()"
            raise RuntimeError(msg)
        return fn(self.document)

    async def end(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None


__all__ = ["HttpPage", "Page", "PageDocument"]
