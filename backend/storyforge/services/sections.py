"""Placement of fixed-label sections inside a story.

Sections are recognised by literal labels ("Also Read:", "Read Next:",
"<TICKER> Price Action:") at the start of a line, optionally behind opening
tags such as ``<p>`` or ``<strong>``. There is no grammar beyond that: when a
marker is missing the text comes back unchanged.
"""
import re
from typing import List, Pattern, Tuple, Union

from storyforge.services.hyperlinks import count_links

WHAT_TO_KNOW_MARKER = "What To Know:"
ALSO_READ_MARKER = "Also Read:"
READ_NEXT_MARKER = "Read Next:"
PRICE_ACTION_MARKER = "Price Action:"

MAJOR_SECTION_MARKERS = (
    PRICE_ACTION_MARKER,
    WHAT_TO_KNOW_MARKER,
    ALSO_READ_MARKER,
    READ_NEXT_MARKER,
)

PRICE_ACTION_LINE = re.compile(r"^\s*(?:<[^>]+>\s*)*[A-Z][A-Z0-9.\-]* Price Action:")
READ_NEXT_LINE = re.compile(r"^\s*(?:<[^>]+>\s*)*Read Next:")
ALSO_READ_LINE = re.compile(r"^\s*(?:<[^>]+>\s*)*Also Read:")

EXTRA_BLANK_LINES = re.compile(r"\n\n\n+")
HTML_PARAGRAPH_BREAK = re.compile(r"</p>\s*<p[^>]*>")


def _collapse_blank_lines(text: str) -> str:
    return EXTRA_BLANK_LINES.sub("\n\n", text).strip()


def _drop_lines(text: str, pattern: Pattern[str], exact: str = "") -> Tuple[str, str]:
    """Remove lines matching ``pattern`` (or equal to ``exact``); return the text and the first removed line."""
    kept: List[str] = []
    first_removed = ""
    for line in text.split("\n"):
        if pattern.search(line) or (exact and line.strip() == exact.strip()):
            if not first_removed:
                first_removed = line.strip()
            continue
        kept.append(line)
    return _collapse_blank_lines("\n".join(kept)), first_removed


def format_section_link(label: str, url: str, headline: str) -> str:
    """Render a section line such as ``Also Read: <a href="...">headline</a>``."""
    return f'{label}: <a href="{url}">{headline}</a>'


def fix_also_read_placement(text: str, also_read_url: str, also_read_headline: str) -> str:
    """Put a single "Also Read:" line directly under the first "What To Know:" line."""
    if not also_read_url or not also_read_headline:
        return text

    lines = text.split("\n")
    what_to_know_index = next(
        (i for i, line in enumerate(lines) if WHAT_TO_KNOW_MARKER in line), -1
    )
    if what_to_know_index == -1:
        return text

    also_read_indexes = [
        i for i, line in enumerate(lines)
        if ALSO_READ_MARKER in line and i != what_to_know_index
    ]
    if also_read_indexes == [what_to_know_index + 1]:
        return text

    remaining = [line for i, line in enumerate(lines) if i not in also_read_indexes]
    anchor = what_to_know_index - sum(1 for i in also_read_indexes if i < what_to_know_index)
    remaining.insert(
        anchor + 1,
        format_section_link("Also Read", also_read_url, also_read_headline),
    )
    return "\n".join(remaining)


def remove_existing_section(text: str, section_pattern: Union[str, Pattern[str]]) -> str:
    """
    Drop a section from its heading line up to the next major section marker.

    The marker line that ends the section is kept.
    """
    pattern = re.compile(section_pattern) if isinstance(section_pattern, str) else section_pattern
    new_lines: List[str] = []
    skip_mode = False

    for line in text.split("\n"):
        if pattern.search(line):
            skip_mode = True
            continue

        if skip_mode and any(marker in line for marker in MAJOR_SECTION_MARKERS):
            skip_mode = False

        if not skip_mode:
            new_lines.append(line)

    return _collapse_blank_lines("\n".join(new_lines))


def remove_price_action(story: str) -> str:
    """Remove every "<TICKER> Price Action:" line."""
    cleaned, _ = _drop_lines(story, PRICE_ACTION_LINE)
    return cleaned


def remove_also_read_and_read_next(story: str) -> str:
    """Remove every "Also Read:" and "Read Next:" line."""
    cleaned, _ = _drop_lines(story, ALSO_READ_LINE)
    cleaned, _ = _drop_lines(cleaned, READ_NEXT_LINE)
    return cleaned


def ensure_proper_price_action_placement(
    story: str,
    price_action_line: str,
    read_next_link: str,
) -> str:
    """
    Rebuild the tail of a story as: body, price action line, Read Next line.

    Existing price action and Read Next lines are removed first; when an
    argument is empty the line already in the story is kept instead.
    """
    if not price_action_line and not read_next_link:
        return story

    clean_story, existing_price_action = _drop_lines(story, PRICE_ACTION_LINE, price_action_line)
    clean_story, existing_read_next = _drop_lines(clean_story, READ_NEXT_LINE, read_next_link)

    final_price_action = (price_action_line or existing_price_action).strip()
    final_read_next = (read_next_link or existing_read_next).strip()

    for line in (final_price_action, final_read_next):
        if line:
            clean_story = f"{clean_story}\n\n{line}" if clean_story else line
    return clean_story


def _split_paragraphs(story: str, is_html: bool) -> List[str]:
    if not is_html:
        return [p for p in story.split("\n\n") if p.strip()]

    paragraphs = [p for p in HTML_PARAGRAPH_BREAK.split(story) if p.strip()]
    if paragraphs:
        paragraphs[0] = re.sub(r"^\s*<p[^>]*>", "", paragraphs[0])
        paragraphs[-1] = re.sub(r"</p>\s*$", "", paragraphs[-1])
    return paragraphs


def insert_also_read_midway(story: str, also_read_link: str) -> str:
    """Insert an "Also Read" line roughly in the middle of the story."""
    if not also_read_link:
        return story

    is_html = "</p>" in story
    paragraphs = _split_paragraphs(story, is_html)
    appended = f"{story}\n\n{also_read_link}"

    if len(paragraphs) <= 2:
        return appended

    insert_index = 2 if len(paragraphs) >= 4 else len(paragraphs) // 2
    paragraphs.insert(insert_index + 1, also_read_link)

    if is_html:
        result = "\n".join(f"<p>{p}</p>" for p in paragraphs)
    else:
        result = "\n\n".join(paragraphs)

    if count_links(result) < count_links(story):
        return appended
    return result
