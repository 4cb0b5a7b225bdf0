"""Request, response and value schemas."""
from storyforge.models.schemas import (
    PriceQuote,
    RelatedArticle,
    AddHyperlinksRequest,
    AddHyperlinksResponse,
    ReportedLinkRequest,
    ReportedLinkResponse,
    PreserveLinksRequest,
    PreserveLinksResponse,
    AlsoReadRequest,
    AlsoReadResponse,
    PriceActionRequest,
    PriceActionResponse,
    PlacementRequest,
    RemoveSectionRequest,
    StoryResponse,
)

__all__ = [
    "PriceQuote",
    "RelatedArticle",
    "AddHyperlinksRequest",
    "AddHyperlinksResponse",
    "ReportedLinkRequest",
    "ReportedLinkResponse",
    "PreserveLinksRequest",
    "PreserveLinksResponse",
    "AlsoReadRequest",
    "AlsoReadResponse",
    "PriceActionRequest",
    "PriceActionResponse",
    "PlacementRequest",
    "RemoveSectionRequest",
    "StoryResponse",
]
