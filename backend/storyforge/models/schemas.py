"""Pydantic schemas for API models."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# Market data schemas
class PriceQuote(BaseModel):
    last: float = 0
    change: float = 0
    change_percent: float = 0
    volume: float = 0
    high: float = 0
    low: float = 0
    open: float = 0
    previous_close: float = 0
    after_hours: float = 0
    after_hours_change: float = 0
    after_hours_change_percent: float = 0


class RelatedArticle(BaseModel):
    headline: str
    url: str
    body: str = ""
    created: Optional[str] = None


# Hyperlink request/response schemas
class AddHyperlinksRequest(BaseModel):
    text: Optional[str] = None
    primary_url: Optional[str] = None
    secondary_url: Optional[str] = None
    primary_outlet: Optional[str] = None
    also_read_url: Optional[str] = None
    also_read_headline: Optional[str] = None


class AddHyperlinksResponse(BaseModel):
    result: str
    primary_outlet: str


class ReportedLinkRequest(BaseModel):
    text: Optional[str] = None
    url: Optional[str] = None
    outlet: Optional[str] = None


class ReportedLinkResponse(BaseModel):
    result: str
    outlet: str


class PreserveLinksRequest(BaseModel):
    existing: str = ""
    candidate: str = ""


class PreserveLinksResponse(BaseModel):
    result: str
    existing_links: int
    candidate_links: int
    kept_existing: bool


# Story section request/response schemas
class AlsoReadRequest(BaseModel):
    ticker: Optional[str] = None
    story: Optional[str] = None
    # Raw news items (headline/title, body, url, created, channels)
    articles: List[Dict[str, Any]] = Field(default_factory=list)


class AlsoReadResponse(BaseModel):
    story: str
    also_read_link: str = ""
    read_next_link: str = ""


class PriceActionRequest(BaseModel):
    ticker: Optional[str] = None
    story: Optional[str] = None
    quote: Optional[PriceQuote] = None
    day_name: Optional[str] = Field(default=None, max_length=20)


class PriceActionResponse(BaseModel):
    story: str
    price_action_line: str


class PlacementRequest(BaseModel):
    story: Optional[str] = None
    price_action_line: str = ""
    read_next_link: str = ""


class RemoveSectionRequest(BaseModel):
    story: Optional[str] = None
    heading: str = Field(default="", max_length=200)


class StoryResponse(BaseModel):
    story: str
