"""RankPath SEO analysis API client.

API base: https://rankpath.io/api
Every endpoint requires ``Authorization: Bearer <api key>``. Successful
responses are wrapped as ``{"data": ...}``; failures come back non-2xx with
``{"error": ..., "message"?: ...}``.
"""

from __future__ import annotations

import logging
from typing import Optional, TypeVar

import httpx
from pydantic import ValidationError

from ..exceptions import (
    RankPathAPIError,
    RankPathNotFoundError,
    RankPathParseError,
    RankPathTransportError,
)
from ..models import (
    CrawlHistory,
    CrawlResult,
    Envelope,
    ErrorBody,
    IssuesPage,
    Project,
)

logger = logging.getLogger(__name__)

API_BASE = "https://rankpath.io/api"

DEFAULT_TIMEOUT = httpx.Timeout(30.0, connect=10.0)

T = TypeVar("T")


class RankPathClient:
    """Authenticated, read-only access to one RankPath account.

    Holds a single connection pool that concurrent calls share; the API key is
    fixed at construction. Close with :meth:`aclose` or use as an async
    context manager.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = API_BASE,
        timeout: httpx.Timeout = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers={"Authorization": f"Bearer {api_key}"},
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> RankPathClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _get(self, path: str, model: type[T], params: Optional[dict] = None) -> T:
        """GET ``path`` and return the unwrapped ``data`` of the response envelope.

        Args:
            path: Endpoint path relative to the API base (e.g. '/projects').
            model: Expected type of the envelope's ``data`` field.
            params: Query parameters; entries whose value is None are dropped.

        Raises:
            RankPathAPIError: Upstream returned a non-2xx status.
            RankPathTransportError: No response was received.
            RankPathParseError: A 2xx body did not match ``model``.
        """
        query = {key: str(value) for key, value in (params or {}).items() if value is not None}
        logger.debug("GET %s params=%s", path, query)

        try:
            response = await self._http.get(path, params=query or None)
        except httpx.HTTPError as exc:
            logger.warning("RankPath request to %s failed: %s", path, exc)
            raise RankPathTransportError(f"Request to {path} failed: {str(exc) or type(exc).__name__}") from exc

        if not response.is_success:
            raise self._api_error(response)

        try:
            envelope = Envelope[model].model_validate_json(response.content)
        except ValidationError as exc:
            logger.warning("Unexpected response body from %s: %s", path, exc)
            raise RankPathParseError(f"Failed to parse response from {path}") from exc
        return envelope.data

    @staticmethod
    def _api_error(response: httpx.Response) -> RankPathAPIError:
        try:
            body = ErrorBody.model_validate_json(response.content)
        except ValidationError:
            body = ErrorBody(error=f"{response.status_code} {response.reason_phrase}".strip())

        logger.warning(
            "RankPath API error %d on %s: %s %s",
            response.status_code,
            response.request.url.path,
            body.error,
            body.message or "",
        )
        error_cls = RankPathNotFoundError if response.status_code == 404 else RankPathAPIError
        return error_cls(response.status_code, body.error, body.message)

    async def list_projects(self) -> list[Project]:
        """All projects of the authenticated user, in upstream order."""
        return await self._get("/projects", list[Project])

    async def get_project(self, project_id: str) -> Project:
        return await self._get(f"/projects/{project_id}", Project)

    async def get_crawl_history(
        self,
        project_id: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> CrawlHistory:
        """A page of crawl history.

        Omitted ``limit``/``offset`` are left out of the request so upstream
        applies its own defaults (10/0).
        """
        return await self._get(
            f"/projects/{project_id}/crawls",
            CrawlHistory,
            {"limit": limit, "offset": offset},
        )

    async def get_latest_crawl(self, project_id: str) -> CrawlResult:
        """Latest crawl with full SEO analysis. A failed crawl is returned, not raised."""
        return await self._get(f"/projects/{project_id}/crawls/latest", CrawlResult)

    async def get_issues(
        self,
        project_id: str,
        severity: Optional[str] = None,
        status: Optional[str] = None,
    ) -> IssuesPage:
        """Issues for a project, optionally filtered.

        Args:
            project_id: The project UUID.
            severity: 'critical', 'warning' or 'info'. Passed through unchecked.
            status: 'open', 'acknowledged' or 'ignored'. Passed through unchecked.
        """
        return await self._get(
            f"/projects/{project_id}/issues",
            IssuesPage,
            {"severity": severity, "status": status},
        )
