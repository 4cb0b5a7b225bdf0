"""Hyperlink insertion and preservation for generated stories."""
import logging
import re
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

ANCHOR_MARKER = "<a href="

# Lines that end the lead paragraph
LEAD_END_MARKERS = ("What To Know:", "What Happened:", "Why It Matters:")
# Lines that open the middle section
MIDDLE_START_MARKERS = ("What To Know:", "What Happened:")
MIDDLE_END_MARKER = "Price Action:"

PHRASE_LENGTH = 3
# Characters that would break surrounding markup if wrapped in a link
UNSAFE_PHRASE_CHARS = re.compile(r"[<>&\[\]()]")


def count_links(text: str) -> int:
    """Count anchor tags in ``text``."""
    return (text or "").count(ANCHOR_MARKER)


def preserve_hyperlinks(existing_text: str, new_text: str) -> str:
    """
    Return ``new_text`` unless it carries fewer links than ``existing_text``.

    Only the number of anchors is compared; their targets are not checked.
    """
    existing_count = count_links(existing_text)
    if existing_count == 0:
        return new_text

    new_count = count_links(new_text)
    if new_count < existing_count:
        logger.info(
            "Hyperlink preservation: keeping original text (%d links) over new text (%d links)",
            existing_count,
            new_count,
        )
        return existing_text

    return new_text


def _phrase_windows(words: Sequence[str], start: int = 0, end: Optional[int] = None):
    """Yield 3-word phrases from ``words[start:end]`` that are safe to wrap in a link."""
    stop = len(words) if end is None else min(end, len(words))
    for i in range(start, stop - PHRASE_LENGTH + 1):
        phrase = " ".join(words[i:i + PHRASE_LENGTH])
        if UNSAFE_PHRASE_CHARS.search(phrase):
            continue
        yield phrase


def _link_first_phrase(region: str, url: str, phrases) -> Optional[str]:
    """Wrap the first phrase found in ``region``; None when none of them occurs."""
    for phrase in phrases:
        pattern = re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)
        if pattern.search(region):
            return pattern.sub(lambda match: f'<a href="{url}">{match.group(0)}</a>', region, count=1)
    return None


def _find_line(lines: List[str], markers: Sequence[str]) -> int:
    for index, line in enumerate(lines):
        if any(marker in line for marker in markers):
            return index
    return -1


def insert_lead_hyperlink(text: str, url: str) -> str:
    """Link a 3-word phrase in the lead, the lines before the first section marker."""
    if not url:
        return text
    if f'href="{url}"' in text:
        return text

    lines = text.split("\n")
    lead_end = _find_line(lines, LEAD_END_MARKERS)
    if lead_end == -1:
        lead_end = len(lines)

    lead_section = "\n".join(lines[:lead_end])
    rest_of_text = "\n".join(lines[lead_end:])

    if ANCHOR_MARKER in lead_section:
        return text

    linked_lead = _link_first_phrase(lead_section, url, _phrase_windows(lead_section.split()))
    if linked_lead is None:
        return text
    return linked_lead + ("\n" + rest_of_text if rest_of_text else "")


def insert_middle_hyperlink(text: str, url: str) -> str:
    """
    Link a 3-word phrase between "What To Know:" and "Price Action:".

    Without both markers the middle third of the story is used instead.
    """
    if not url:
        return text
    if f'href="{url}"' in text:
        return text

    lines = text.split("\n")
    section_start = -1
    section_end = -1
    for index, line in enumerate(lines):
        if any(marker in line for marker in MIDDLE_START_MARKERS):
            section_start = index
        if MIDDLE_END_MARKER in line:
            section_end = index
            break

    if section_start == -1 or section_end == -1:
        words = text.split()
        window_start = len(words) // 3
        window_end = len(words) * 2 // 3
        linked = _link_first_phrase(text, url, _phrase_windows(words, window_start, window_end))
        return text if linked is None else linked

    middle_section = "\n".join(lines[section_start + 1:section_end])
    before_section = "\n".join(lines[:section_start + 1])
    after_section = "\n".join(lines[section_end:])

    if ANCHOR_MARKER in middle_section:
        return text

    linked_middle = _link_first_phrase(middle_section, url, _phrase_windows(middle_section.split()))
    if linked_middle is None:
        return text
    return f"{before_section}\n{linked_middle}\n{after_section}"
