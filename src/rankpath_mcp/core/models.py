"""Pydantic data models — the RankPath API's response shapes.

Upstream JSON is camelCase; every model aliases its fields so callers work in
snake_case while dumps by alias reproduce the wire format. Models are frozen:
nothing is mutated after it comes off the wire. Numbers and booleans are
strict: a mistyped upstream value fails validation instead of being coerced.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class IssueSeverity(str, Enum):
    """Known issue severities. Filters are forwarded verbatim, so this is documentation, not validation."""

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class IssueStatus(str, Enum):
    """Known issue lifecycle states."""

    OPEN = "open"
    ACKNOWLEDGED = "acknowledged"
    IGNORED = "ignored"


class RankPathModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Project(RankPathModel):
    """A tracked site."""

    id: str
    name: str
    url: str
    created_at: str


class IssueCounts(RankPathModel):
    critical: StrictInt
    warning: StrictInt
    info: StrictInt


class CrawlSummary(RankPathModel):
    """One historical crawl, abbreviated."""

    id: str
    status: str
    crawled_at: str
    score: Optional[StrictInt] = None
    issue_counts: Optional[IssueCounts] = None
    http_status: Optional[StrictInt] = None
    response_time_ms: Optional[StrictInt] = None


class OpenGraph(RankPathModel):
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None


class SeoData(RankPathModel):
    """On-page SEO attributes of a crawled page."""

    title: Optional[str] = None
    meta_description: Optional[str] = None
    h1_tags: Optional[list[str]] = None
    canonical_url: Optional[str] = None
    language: Optional[str] = None
    robots_meta: Optional[str] = None
    open_graph: Optional[OpenGraph] = None


class ContentMetrics(RankPathModel):
    word_count: Optional[StrictInt] = None
    list_count: Optional[StrictInt] = None
    image_count: StrictInt
    link_count: StrictInt
    internal_link_count: StrictInt
    external_link_count: StrictInt


class Image(RankPathModel):
    src: str
    alt: str
    has_alt: StrictBool


class Link(RankPathModel):
    href: str
    text: str
    is_internal: StrictBool


class GeoAnalysis(RankPathModel):
    """Generative-engine-optimization scoring. Every field is absent until upstream computes it."""

    citation_score: Optional[StrictInt] = None
    citable_facts_count: Optional[StrictInt] = None
    questions_answered: Optional[list[str]] = None
    strengths: Optional[list[str]] = None
    weaknesses: Optional[list[str]] = None
    recommendations: Optional[list[str]] = None
    authority_topics: Optional[list[str]] = None
    analyzed_at: Optional[str] = None


class CrawlResult(CrawlSummary):
    """One crawl in full detail.

    A failed crawl is still a CrawlResult: ``status`` says so and
    ``error_message`` carries the reason.
    """

    project_id: Optional[str] = None
    error_message: Optional[str] = None
    seo_data: Optional[SeoData] = None
    content_metrics: Optional[ContentMetrics] = None
    images: Optional[list[Image]] = None
    links: Optional[list[Link]] = None
    geo_analysis: Optional[GeoAnalysis] = None


class Issue(RankPathModel):
    """One detected SEO problem."""

    id: str
    type: str
    severity: str = Field(description="critical, warning or info")
    message: str
    details: Optional[Any] = Field(None, description="Free-form detail object from upstream")
    status: str = Field(description="open, acknowledged or ignored")
    created_at: str
    updated_at: str


class IssuesSummary(RankPathModel):
    """Aggregate issue counts, computed upstream."""

    critical: StrictInt
    warning: StrictInt
    info: StrictInt
    open: StrictInt
    acknowledged: StrictInt
    ignored: StrictInt


class CrawlHistory(RankPathModel):
    """A page of crawl history."""

    crawls: list[CrawlSummary]
    total: StrictInt
    limit: StrictInt
    offset: StrictInt


class IssuesPage(RankPathModel):
    issues: list[Issue]
    total: StrictInt
    summary: IssuesSummary


# ─── Wire envelopes ──────────────────────────────────────────────────────────


class Envelope(BaseModel, Generic[T]):
    """The ``{"data": ...}`` wrapper around every successful response."""

    data: T


class ErrorBody(BaseModel):
    """The ``{"error": ..., "message"?: ...}`` body of a failed response."""

    error: str
    message: Optional[str] = None
