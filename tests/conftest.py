"""Shared fixtures: upstream payloads and a client wired to a fake transport."""

from __future__ import annotations

import copy
from typing import Callable

import httpx
import pytest

from rankpath_mcp.core.clients import RankPathClient

PROJECT = {
    "id": "5f0c8a4e-1b2d-4c3e-9f00-aa11bb22cc33",
    "name": "Example Store",
    "url": "https://shop.example.com",
    "createdAt": "2025-03-14T09:26:53Z",
}

OTHER_PROJECT = {
    "id": "0a9b8c7d-6e5f-4a3b-2c1d-0e9f8a7b6c5d",
    "name": "Docs",
    "url": "https://docs.example.com",
    "createdAt": "2025-04-01T12:00:00Z",
}

CRAWL_HISTORY = {
    "crawls": [
        {
            "id": "c2",
            "status": "completed",
            "crawledAt": "2025-06-02T08:00:00Z",
            "score": 87,
            "issueCounts": {"critical": 0, "warning": 3, "info": 5},
            "httpStatus": 200,
            "responseTimeMs": 412,
        },
        {
            "id": "c1",
            "status": "failed",
            "crawledAt": "2025-06-01T08:00:00Z",
        },
    ],
    "total": 2,
    "limit": 10,
    "offset": 0,
}

LATEST_CRAWL = {
    "id": "c2",
    "projectId": PROJECT["id"],
    "status": "completed",
    "crawledAt": "2025-06-02T08:00:00Z",
    "score": 87,
    "issueCounts": {"critical": 0, "warning": 3, "info": 5},
    "httpStatus": 200,
    "responseTimeMs": 412,
    "seoData": {
        "title": "Example Store | Handmade goods",
        "metaDescription": "Handmade goods shipped worldwide.",
        "h1Tags": ["Handmade goods"],
        "canonicalUrl": "https://shop.example.com/",
        "language": "en",
        "robotsMeta": "index, follow",
        "openGraph": {"title": "Example Store", "description": None, "image": "https://shop.example.com/og.png"},
    },
    "contentMetrics": {
        "wordCount": 812,
        "imageCount": 2,
        "linkCount": 3,
        "internalLinkCount": 2,
        "externalLinkCount": 1,
    },
    "images": [
        {"src": "/hero.jpg", "alt": "Workshop", "hasAlt": True},
        {"src": "/logo.svg", "alt": "", "hasAlt": False},
    ],
    "links": [
        {"href": "/about", "text": "About", "isInternal": True},
        {"href": "https://partner.example.org", "text": "Partner", "isInternal": False},
    ],
}

FAILED_CRAWL = {
    "id": "c1",
    "projectId": PROJECT["id"],
    "status": "failed",
    "errorMessage": "DNS lookup failed",
    "crawledAt": "2025-06-01T08:00:00Z",
    "score": None,
}

GEO_ANALYSIS = {
    "citationScore": 64,
    "citableFactsCount": 12,
    "questionsAnswered": ["What does the store sell?"],
    "strengths": ["Clear product descriptions"],
    "weaknesses": ["No author information"],
    "recommendations": ["Add an FAQ section"],
    "authorityTopics": ["handmade ceramics"],
    "analyzedAt": "2025-06-02T08:05:00Z",
}

ISSUES_PAGE = {
    "issues": [
        {
            "id": "i1",
            "type": "missing_alt",
            "severity": "warning",
            "message": "Image is missing alt text",
            "details": {"src": "/logo.svg", "occurrences": 1},
            "status": "open",
            "createdAt": "2025-06-02T08:00:00Z",
            "updatedAt": "2025-06-02T08:00:00Z",
        },
        {
            "id": "i2",
            "type": "short_title",
            "severity": "info",
            "message": "Title is shorter than 30 characters",
            "status": "acknowledged",
            "createdAt": "2025-06-01T08:00:00Z",
            "updatedAt": "2025-06-02T10:00:00Z",
        },
    ],
    "total": 2,
    "summary": {"critical": 0, "warning": 1, "info": 1, "open": 1, "acknowledged": 1, "ignored": 0},
}


def envelope(data) -> dict:
    return {"data": copy.deepcopy(data)}


class FakeRankPath:
    """Route table standing in for the upstream API. Records every request it sees.

    Routes map a URL path to ``(status, body)``; a dict/list body is sent as
    JSON, bytes are sent raw.
    """

    def __init__(self, routes: dict[str, tuple]):
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"error": "not_found", "message": f"no route {request.url.path}"})
        status, body = route
        if isinstance(body, bytes):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    def reply_everywhere(self, status: int, body) -> None:
        """Make every known route answer with the same status and body."""
        for path in self.routes:
            self.routes[path] = (status, body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


PROJECT_PATH = f"/api/projects/{PROJECT['id']}"


def default_routes() -> dict[str, tuple]:
    return {
        "/api/projects": (200, envelope([PROJECT, OTHER_PROJECT])),
        PROJECT_PATH: (200, envelope(PROJECT)),
        f"{PROJECT_PATH}/crawls": (200, envelope(CRAWL_HISTORY)),
        f"{PROJECT_PATH}/crawls/latest": (200, envelope(LATEST_CRAWL)),
        f"{PROJECT_PATH}/issues": (200, envelope(ISSUES_PAGE)),
    }


@pytest.fixture
def upstream() -> FakeRankPath:
    return FakeRankPath(default_routes())


@pytest.fixture
def make_client() -> Callable[..., RankPathClient]:
    def factory(handler, api_key: str = "test-key") -> RankPathClient:
        return RankPathClient(api_key, transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def client(upstream, make_client) -> RankPathClient:
    return make_client(upstream)
