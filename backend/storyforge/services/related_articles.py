"""Choosing articles for the "Also Read" and "Read Next" links."""
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from dateutil import parser as dtparser

from storyforge.config import get_settings
from storyforge.models.schemas import RelatedArticle

PRESS_RELEASE_CHANNELS = {"press releases", "press-releases", "pressrelease"}
NO_HEADLINE = "[No Headline]"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _normalize_channel(name: str) -> str:
    return name.lower().replace("-", " ").replace("_", " ")


def _is_press_release(item: Dict[str, Any]) -> bool:
    channels = item.get("channels")
    if not isinstance(channels, list):
        return False
    normalized = {_normalize_channel(name) for name in PRESS_RELEASE_CHANNELS}
    for channel in channels:
        name = channel.get("name") if isinstance(channel, dict) else channel
        if isinstance(name, str) and _normalize_channel(name) in normalized:
            return True
    return False


def _parse_created(value: Any) -> datetime:
    """Parse a publication timestamp; unknown or malformed values sort last."""
    if not value:
        return _EPOCH
    try:
        parsed = dtparser.parse(str(value))
    except (ValueError, OverflowError):
        return _EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def select_related_articles(
    items: Iterable[Dict[str, Any]],
    limit: int = 2,
    min_body_length: Optional[int] = None,
) -> List[RelatedArticle]:
    """
    Filter raw news items down to the newest usable related articles.

    Press releases and ``/insights/`` pages are skipped, as are items without
    a URL or with a body too short to be a real article.
    """
    if min_body_length is None:
        min_body_length = get_settings().related_article_min_body

    candidates = []
    for item in items:
        url = item.get("url") or ""
        if _is_press_release(item) or "/insights/" in url:
            continue

        body = item.get("body") or ""
        if not url or len(body) <= min_body_length:
            continue

        candidates.append(
            RelatedArticle(
                headline=item.get("headline") or item.get("title") or NO_HEADLINE,
                body=body,
                url=url,
                created=item.get("created"),
            )
        )

    candidates.sort(key=lambda article: _parse_created(article.created), reverse=True)
    return candidates[:limit]
