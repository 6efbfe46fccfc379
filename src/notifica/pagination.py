"""Cursor pagination as a lazy async iterator."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel

if TYPE_CHECKING:
    from .client import NotificaClient
    from .config import RequestOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Paginator(Generic[T]):
    """Iterate every item of a cursor-paginated listing.

    Pages are fetched on demand: page n+1 is requested only after every
    item of page n has been consumed. Iteration stops as soon as a page
    reports ``has_more=False``. A paginator is single-use; create a new one
    to traverse the listing again.

    Example:
        ```python
        async for template in notifica.templates.list_all(channel="email"):
            print(template.slug)
        ```

    Attributes:
        pages_fetched: Number of pages requested so far.
    """

    def __init__(
        self,
        client: NotificaClient,
        path: str,
        query: Mapping[str, Any] | None = None,
        *,
        item_type: type[BaseModel] | None = None,
        options: RequestOptions | None = None,
    ) -> None:
        self._client = client
        self._path = path
        self._query = {key: value for key, value in (query or {}).items() if key != "cursor"}
        self._item_type = item_type
        self._options = options
        self._buffer: deque[T] = deque()
        self._cursor: str | None = None
        self._done = False
        self.pages_fetched = 0

    def __aiter__(self) -> Paginator[T]:
        return self

    async def __anext__(self) -> T:
        while not self._buffer:
            if self._done:
                raise StopAsyncIteration
            await self._fetch_page()
        return self._buffer.popleft()

    async def _fetch_page(self) -> None:
        query = dict(self._query)
        if self._cursor:
            query["cursor"] = self._cursor

        page = await self._client.list(
            self._path, query, self._options, item_type=self._item_type
        )
        self.pages_fetched += 1
        self._buffer.extend(page.data)

        # The cursor only matters while the server says there is more
        if page.meta.has_more and page.meta.cursor:
            self._cursor = page.meta.cursor
        else:
            self._done = True

        logger.debug(
            "Fetched page %d of %s (%d items, has_more=%s)",
            self.pages_fetched,
            self._path,
            len(page.data),
            page.meta.has_more,
        )

    async def to_list(self) -> list[T]:
        """Drain the remaining items into a list."""
        return [item async for item in self]
