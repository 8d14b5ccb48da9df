"""
Turn a site's sitemap.xml into the ordered list of page URLs to export.

Two shapes are understood:
  * <urlset>       a leaf sitemap, one <url><loc>...</loc></url> per page
  * <sitemapindex> an index of further sitemaps; only the FIRST one listed is
                   followed, the rest are ignored
"""

import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup
from lxml import etree

from .config import HEADERS, SITEMAP_TIMEOUT
from .errors import FetchError, FormatError

logger = logging.getLogger(__name__)


def sitemap_url_for(site_url: str) -> str:
    return site_url.rstrip("/") + "/sitemap.xml"


def download(url: str, session=None) -> bytes:
    """
    GET the sitemap once (no retries) and return the raw body.
    Raises FetchError on network errors, HTTP errors and empty bodies.
    """
    http = session or requests
    try:
        resp = http.get(url, headers=HEADERS, timeout=SITEMAP_TIMEOUT)
    except requests.RequestException as exc:
        raise FetchError(f"Could not fetch sitemap: {exc}", url) from exc

    try:
        resp.raise_for_status()
    except requests.HTTPError as exc:
        logger.error(f"Response status: {resp.status_code}")
        logger.error(f"Response data: {resp.text[:500]}")
        raise FetchError(f"HTTP {resp.status_code} for sitemap", url) from exc

    if not resp.content or not resp.content.strip():
        raise FetchError("No data received from sitemap URL", url)
    return resp.content


def check_well_formed(body: bytes, url: Optional[str] = None):
    """
    Reject bodies a strict XML parser refuses. BeautifulSoup runs lxml in
    recover mode and would otherwise repair a truncated download into made-up
    URLs.
    """
    parser = etree.XMLParser(recover=False, resolve_entities=False, no_network=True)
    try:
        etree.fromstring(body, parser)
    except etree.XMLSyntaxError as exc:
        raise FormatError(f"Could not parse sitemap XML: {exc}", url) from exc


def _loc_of(entry):
    loc = entry.find("loc", recursive=False)
    if loc is None:
        return ""
    return loc.get_text(strip=True)


def parse_urlset(root) -> list:
    """Return every <loc> in document order, dropping entries that lack one."""
    urls = []
    for entry in root.find_all("url", recursive=False):
        loc = _loc_of(entry)
        if not loc:
            logger.warning(f"Skipping invalid URL entry: {entry}")
            continue
        urls.append(loc)
    return urls


def fetch_sitemap(url: str, session=None) -> list:
    """
    Fetch ``url`` and return the page URLs it lists.

    A <sitemapindex> is resolved by recursing into its first <sitemap> only.
    Raises FetchError when the download fails and FormatError when the body is
    not a recognised sitemap.
    """
    logger.info(f"Fetching sitemap from: {url}")
    body = download(url, session=session)

    logger.info("Parsing XML response...")
    check_well_formed(body, url)
    soup = BeautifulSoup(body, "xml")
    root = soup.find()
    if root is None:
        raise FormatError("Could not parse sitemap XML", url)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Parsed XML structure:\n{root.prettify()}")

    if root.name == "urlset" and root.find("url", recursive=False) is not None:
        urls = parse_urlset(root)
        logger.info(f"Found {len(urls)} page URL(s) in {url}")
        return urls

    if root.name == "sitemapindex":
        children = root.find_all("sitemap", recursive=False)
        if children:
            first = _loc_of(children[0])
            if not first:
                raise FormatError("First <sitemap> entry has no <loc>", url)
            if len(children) > 1:
                logger.info(f"Sitemap index lists {len(children)} sitemaps; only the first is used")
            logger.info("Found sitemap index, fetching first sitemap...")
            return fetch_sitemap(first, session=session)

    logger.error(f"Unexpected XML structure: <{root.name}>")
    raise FormatError("Invalid sitemap format - unexpected XML structure", url)
