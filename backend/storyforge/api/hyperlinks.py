"""Hyperlink API endpoints."""
import logging

from fastapi import APIRouter, HTTPException

from storyforge.models.schemas import (
    AddHyperlinksRequest,
    AddHyperlinksResponse,
    PreserveLinksRequest,
    PreserveLinksResponse,
    ReportedLinkRequest,
    ReportedLinkResponse,
)
from storyforge.services.hyperlinks import (
    count_links,
    insert_lead_hyperlink,
    insert_middle_hyperlink,
    preserve_hyperlinks,
)
from storyforge.services.outlets import get_outlet_name_from_url, insert_link_on_reported
from storyforge.services.sections import fix_also_read_placement

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/add", response_model=AddHyperlinksResponse)
async def add_hyperlinks(request: AddHyperlinksRequest):
    """
    Link the lead to the primary source, the middle of the story to the
    secondary source, and pin the "Also Read" line under "What To Know".
    """
    if not request.text:
        raise HTTPException(status_code=400, detail="Missing text field")

    try:
        primary_name = request.primary_outlet or get_outlet_name_from_url(request.primary_url or "")
        linked_text = request.text

        if request.primary_url:
            linked_text = insert_lead_hyperlink(linked_text, request.primary_url)

        if request.secondary_url:
            linked_text = insert_middle_hyperlink(linked_text, request.secondary_url)

        if request.also_read_url and request.also_read_headline:
            linked_text = fix_also_read_placement(
                linked_text, request.also_read_url, request.also_read_headline
            )

        return AddHyperlinksResponse(result=linked_text, primary_outlet=primary_name)
    except Exception as e:
        logger.exception("Failed to add hyperlinks")
        raise HTTPException(status_code=500, detail=f"Error adding hyperlinks: {str(e)}")


@router.post("/reported", response_model=ReportedLinkResponse)
async def link_reported(request: ReportedLinkRequest):
    """Attribute the story to its outlet by linking the word "reported"."""
    if not request.text:
        raise HTTPException(status_code=400, detail="Missing text field")
    if not request.url:
        raise HTTPException(status_code=400, detail="Missing url field")

    try:
        outlet = request.outlet or get_outlet_name_from_url(request.url)
        result = insert_link_on_reported(request.text, outlet, request.url)
        return ReportedLinkResponse(result=result, outlet=outlet)
    except Exception as e:
        logger.exception("Failed to link reported")
        raise HTTPException(status_code=500, detail=f"Error linking source: {str(e)}")


@router.post("/preserve", response_model=PreserveLinksResponse)
async def preserve_links(request: PreserveLinksRequest):
    """Keep the existing story when a rewrite dropped hyperlinks."""
    existing_links = count_links(request.existing)
    candidate_links = count_links(request.candidate)
    result = preserve_hyperlinks(request.existing, request.candidate)

    return PreserveLinksResponse(
        result=result,
        existing_links=existing_links,
        candidate_links=candidate_links,
        kept_existing=candidate_links < existing_links,
    )
