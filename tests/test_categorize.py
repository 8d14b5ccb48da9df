import logging

import pytest

from gitbook_pdf.categorize import UNKNOWN_CATEGORY, category_of, site_name_of


@pytest.mark.parametrize("url, expected", [
    ("https://renownedgames.gitbook.io/ai-tree/settings/page1", "settings"),
    ("https://renownedgames.gitbook.io/ai-tree/android/page2", "android"),
    ("https://renownedgames.gitbook.io/ai-tree/android", "android"),
    ("https://a.b/c/d/e/f", "d"),
    ("https://a.b/c//e", ""),
    ("https://a.b/c/%20x", "%20x"),
])
def test_category_is_fifth_segment(url, expected):
    assert category_of(url) == expected


def test_short_url_falls_back_to_unknown(caplog):
    with caplog.at_level(logging.ERROR, logger="gitbook_pdf.categorize"):
        assert category_of("https://a.b/c") == UNKNOWN_CATEGORY == "unknown"
    assert any("URL structure is incorrect" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("url, expected", [
    ("https://renownedgames.gitbook.io/ai-tree", "ai-tree"),
    ("https://renownedgames.gitbook.io/ai-tree/", "ai-tree"),
    ("https://docs.example.com", "docs.example.com"),
])
def test_site_name_is_last_segment(url, expected):
    assert site_name_of(url) == expected


def test_site_name_of_empty_url():
    with pytest.raises(ValueError):
        site_name_of("///")
