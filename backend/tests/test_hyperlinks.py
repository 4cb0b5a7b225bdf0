"""Unit tests for phrase hyperlinks and the hyperlink-count guard."""
import logging

import pytest
from storyforge.services.hyperlinks import (
    count_links,
    insert_lead_hyperlink,
    insert_middle_hyperlink,
    preserve_hyperlinks,
)

PRIMARY_URL = "https://www.cnbc.com/apple-earnings"
SECONDARY_URL = "https://www.reuters.com/apple-supply"


@pytest.fixture
def sample_story():
    """Story with a lead, a What To Know section and a price action line."""
    return (
        "Apple Inc. shares climbed on Tuesday.\n"
        "What To Know: The company beat estimates.\n"
        "Revenue grew strongly in the quarter.\n"
        "AAPL Price Action: Apple shares rose 2% on Tuesday."
    )


class TestLeadHyperlink:
    """Test insert_lead_hyperlink."""

    def test_links_first_phrase_of_lead(self, sample_story):
        result = insert_lead_hyperlink(sample_story, PRIMARY_URL)

        assert result.split("\n")[0] == (
            f'<a href="{PRIMARY_URL}">Apple Inc. shares</a> climbed on Tuesday.'
        )
        assert result.split("\n")[1:] == sample_story.split("\n")[1:]

    def test_without_markers_whole_text_is_lead(self):
        result = insert_lead_hyperlink("Tesla delivered more cars than expected.", PRIMARY_URL)
        assert result == f'<a href="{PRIMARY_URL}">Tesla delivered more</a> cars than expected.'

    def test_markup_only_windows_are_a_no_op(self):
        text = "Shares (AAPL) [rose] <b>today</b>\nWhat To Know: Details follow here."
        assert insert_lead_hyperlink(text, PRIMARY_URL) == text

    def test_marker_on_first_line_is_a_no_op(self):
        text = "What To Know: Nothing precedes this line at all."
        assert insert_lead_hyperlink(text, PRIMARY_URL) == text

    def test_url_already_linked_is_a_no_op(self, sample_story):
        text = f'{sample_story}\nSee <a href="{PRIMARY_URL}">the report</a>.'
        assert insert_lead_hyperlink(text, PRIMARY_URL) == text

    def test_lead_with_existing_link_is_a_no_op(self):
        text = 'Shares of <a href="https://example.com">Apple</a> rose sharply today.\nWhat To Know: x'
        assert insert_lead_hyperlink(text, PRIMARY_URL) == text

    def test_empty_url_is_a_no_op(self, sample_story):
        assert insert_lead_hyperlink(sample_story, "") == sample_story

    def test_is_idempotent(self, sample_story):
        once = insert_lead_hyperlink(sample_story, PRIMARY_URL)
        assert insert_lead_hyperlink(once, PRIMARY_URL) == once


class TestMiddleHyperlink:
    """Test insert_middle_hyperlink."""

    def test_links_between_what_to_know_and_price_action(self, sample_story):
        result = insert_middle_hyperlink(sample_story, SECONDARY_URL)

        assert result == (
            "Apple Inc. shares climbed on Tuesday.\n"
            "What To Know: The company beat estimates.\n"
            f'<a href="{SECONDARY_URL}">Revenue grew strongly</a> in the quarter.\n'
            "AAPL Price Action: Apple shares rose 2% on Tuesday."
        )

    def test_falls_back_to_middle_third(self):
        text = "one two three four five six seven eight nine"
        result = insert_middle_hyperlink(text, SECONDARY_URL)

        assert result == f'one two three <a href="{SECONDARY_URL}">four five six</a> seven eight nine'

    def test_empty_middle_section_is_a_no_op(self):
        text = "Lead here.\nWhat To Know: Facts.\nAAPL Price Action: Flat."
        assert insert_middle_hyperlink(text, SECONDARY_URL) == text

    def test_middle_with_existing_link_is_a_no_op(self):
        text = (
            "Lead here.\nWhat To Know: Facts.\n"
            'Demand <a href="https://example.com">was strong</a> this quarter.\n'
            "AAPL Price Action: Flat."
        )
        assert insert_middle_hyperlink(text, SECONDARY_URL) == text

    def test_url_already_linked_is_a_no_op(self, sample_story):
        text = insert_middle_hyperlink(sample_story, SECONDARY_URL)
        assert insert_middle_hyperlink(text, SECONDARY_URL) == text


class TestPreserveHyperlinks:
    """Test count_links and preserve_hyperlinks."""

    def test_count_links(self):
        assert count_links('<a href="a">a</a> and <a href="b">b</a>') == 2
        assert count_links("") == 0

    def test_keeps_existing_when_candidate_drops_links(self, caplog):
        existing = '<a href="a">one</a> and <a href="b">two</a>'
        candidate = 'rewritten with <a href="a">one</a> only'

        with caplog.at_level(logging.INFO, logger="storyforge.services.hyperlinks"):
            assert preserve_hyperlinks(existing, candidate) == existing
        assert "keeping original text (2 links)" in caplog.text

    def test_accepts_candidate_with_same_or_more_links(self):
        existing = '<a href="a">one</a>'
        assert preserve_hyperlinks(existing, 'new <a href="x">link</a>') == 'new <a href="x">link</a>'
        assert preserve_hyperlinks(existing, '<a href="a">1</a><a href="b">2</a>').count("<a href=") == 2

    def test_existing_without_links_accepts_candidate(self):
        assert preserve_hyperlinks("plain", "also plain") == "also plain"
