"""Unit tests for outlet naming and "reported" attribution."""
import pytest
from storyforge.services.outlets import (
    FALLBACK_OUTLET_NAME,
    get_outlet_name_from_url,
    insert_link_on_reported,
)

SOURCE_URL = "https://www.cnbc.com/2024/06/10/apple-wwdc.html"


class TestOutletName:
    """Test get_outlet_name_from_url."""

    def test_mapped_outlet(self):
        assert get_outlet_name_from_url(SOURCE_URL) == "CNBC"
        assert get_outlet_name_from_url("https://www.reuters.com/markets/") == "Reuters"

    def test_unmapped_outlet_is_capitalized(self):
        assert get_outlet_name_from_url("https://foo.example.com/story") == "Foo"

    @pytest.mark.parametrize("url", ["", "not a url", "www.cnbc.com/article", "https://[::1"])
    def test_invalid_urls_fall_back(self, url):
        assert get_outlet_name_from_url(url) == FALLBACK_OUTLET_NAME
        assert FALLBACK_OUTLET_NAME == "Primary Source"

    def test_single_label_host_returned_as_is(self):
        assert get_outlet_name_from_url("http://localhost:8000/feed") == "localhost"


class TestInsertLinkOnReported:
    """Test insert_link_on_reported."""

    def test_links_reported_after_outlet(self):
        text = "Apple shares rose after CNBC reported strong iPhone demand."
        result = insert_link_on_reported(text, "CNBC", SOURCE_URL)

        assert result == (
            f'Apple shares rose after CNBC <a href="{SOURCE_URL}">reported</a> strong iPhone demand.'
        )

    def test_is_idempotent(self):
        text = "Apple shares rose after CNBC reported strong iPhone demand."
        once = insert_link_on_reported(text, "CNBC", SOURCE_URL)
        twice = insert_link_on_reported(once, "CNBC", SOURCE_URL)

        assert once == twice
        assert twice.count("<a href=") == 1

    def test_falls_back_to_first_bare_reported(self):
        text = "The company reported earnings. Analysts reported nothing new."
        result = insert_link_on_reported(text, "Reuters", SOURCE_URL)

        assert result == (
            f'The company <a href="{SOURCE_URL}">reported</a> earnings. Analysts reported nothing new.'
        )

    def test_prepends_attribution_when_keyword_missing(self):
        result = insert_link_on_reported("Shares rose.", "Reuters", SOURCE_URL)

        assert result == f'Reuters <a href="{SOURCE_URL}">reported</a>:\n\nShares rose.'
        assert insert_link_on_reported(result, "Reuters", SOURCE_URL) == result

    def test_empty_url_is_idempotent(self):
        text = "Shares rose after CNBC reported the deal."
        once = insert_link_on_reported(text, "CNBC", "")

        assert once == 'Shares rose after CNBC <a href="">reported</a> the deal.'
        assert insert_link_on_reported(once, "CNBC", "") == once

    def test_existing_linked_reported_left_alone(self):
        text = 'Bloomberg <a href="https://bloomberg.com/x">Reported</a> the deal. CNBC reported it too.'
        assert insert_link_on_reported(text, "CNBC", SOURCE_URL) == text

    def test_outlet_name_is_matched_literally(self):
        text = "Shares fell after S&P reported weaker guidance."
        result = insert_link_on_reported(text, "S&P", SOURCE_URL)

        assert f'S&P <a href="{SOURCE_URL}">reported</a>' in result
