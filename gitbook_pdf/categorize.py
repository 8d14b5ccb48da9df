"""
Derive folder names from URLs.

Both helpers split on "/" without any URL parsing, so for
"https://host/site/settings/page" the pieces are
["https:", "", "host", "site", "settings", "page"] and the category is
"settings".
"""

import logging

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY = "unknown"
CATEGORY_INDEX = 4


def category_of(url: str) -> str:
    """Return the 5th "/"-separated piece of ``url``, or "unknown" if it has fewer."""
    parts = url.split("/")
    if len(parts) <= CATEGORY_INDEX:
        logger.error(f"URL structure is incorrect: {url}")
        return UNKNOWN_CATEGORY
    return parts[CATEGORY_INDEX]


def site_name_of(url: str) -> str:
    """Last non-empty "/"-separated piece of ``url``, e.g. "ai-tree"."""
    parts = [part for part in url.split("/") if part]
    if not parts:
        raise ValueError(f"Cannot derive a site name from {url!r}")
    return parts[-1]
