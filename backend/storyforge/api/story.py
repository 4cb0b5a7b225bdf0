"""Story section API endpoints."""
import logging
import re

from fastapi import APIRouter, HTTPException

from storyforge.models.schemas import (
    AlsoReadRequest,
    AlsoReadResponse,
    PlacementRequest,
    PriceActionRequest,
    PriceActionResponse,
    RemoveSectionRequest,
    StoryResponse,
)
from storyforge.services.hyperlinks import preserve_hyperlinks
from storyforge.services.price_action import build_price_action_line
from storyforge.services.related_articles import select_related_articles
from storyforge.services.sections import (
    ensure_proper_price_action_placement,
    format_section_link,
    insert_also_read_midway,
    remove_also_read_and_read_next,
    remove_existing_section,
    remove_price_action,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/also-read", response_model=AlsoReadResponse)
async def add_also_read(request: AlsoReadRequest):
    """
    Add "Also Read" midway through the story and "Read Next" at the end.

    The newest usable article feeds "Also Read" and the next one "Read Next";
    a single article serves both.
    """
    if not request.ticker or not request.story:
        raise HTTPException(status_code=400, detail="Ticker and story are required.")

    try:
        articles = select_related_articles(request.articles, limit=2)
        logger.info("Found %d related articles for %s", len(articles), request.ticker.upper())

        also_read = articles[0] if articles else None
        read_next = articles[1] if len(articles) > 1 else also_read

        also_read_link = format_section_link("Also Read", also_read.url, also_read.headline) if also_read else ""
        read_next_link = format_section_link("Read Next", read_next.url, read_next.headline) if read_next else ""

        complete_story = remove_also_read_and_read_next(request.story)
        if also_read_link:
            complete_story = insert_also_read_midway(complete_story, also_read_link)
        complete_story = ensure_proper_price_action_placement(complete_story, "", read_next_link)

        return AlsoReadResponse(
            story=preserve_hyperlinks(request.story, complete_story),
            also_read_link=also_read_link,
            read_next_link=read_next_link,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error adding Also Read link")
        raise HTTPException(status_code=500, detail=f"Failed to add Also Read link: {str(e)}")


@router.post("/price-action", response_model=PriceActionResponse)
async def add_price_action(request: PriceActionRequest):
    """Replace any price action line with a fresh one above "Read Next"."""
    if not request.ticker or not request.story:
        raise HTTPException(status_code=400, detail="Ticker and story are required.")

    try:
        price_action_line = build_price_action_line(request.ticker, request.quote, request.day_name)

        complete_story = remove_price_action(request.story)
        complete_story = ensure_proper_price_action_placement(complete_story, price_action_line, "")

        return PriceActionResponse(
            story=preserve_hyperlinks(request.story, complete_story),
            price_action_line=price_action_line,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error adding price action")
        raise HTTPException(status_code=500, detail=f"Failed to add price action: {str(e)}")


@router.post("/placement", response_model=StoryResponse)
async def place_closing_lines(request: PlacementRequest):
    """Order the story tail as body, price action, Read Next."""
    if not request.story:
        raise HTTPException(status_code=400, detail="Story is required.")

    story = ensure_proper_price_action_placement(
        request.story, request.price_action_line, request.read_next_link
    )
    return StoryResponse(story=story)


@router.post("/remove-section", response_model=StoryResponse)
async def remove_section(request: RemoveSectionRequest):
    """Remove the section that starts at the line containing ``heading``."""
    if not request.story or not request.heading.strip():
        raise HTTPException(status_code=400, detail="Story and heading are required.")

    try:
        updated = remove_existing_section(request.story, re.compile(re.escape(request.heading.strip())))
        return StoryResponse(story=updated)
    except Exception as e:
        logger.exception("Error removing section %r", request.heading)
        raise HTTPException(status_code=500, detail=f"Failed to remove section: {str(e)}")
