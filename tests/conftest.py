from contextlib import contextmanager
from pathlib import Path
from unittest import mock

import pytest
import requests
from PyPDF2 import PdfReader, PdfWriter

SITE_URL = "https://renownedgames.gitbook.io/ai-tree"
SITEMAP_URL = SITE_URL + "/sitemap.xml"

URLSET = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
{entries}
</urlset>
"""

SITEMAPINDEX = """<?xml version="1.0" encoding="UTF-8"?>
<sitemapindex xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
{entries}
</sitemapindex>
"""


def urlset(*locs):
    entries = "\n".join(f"  <url><loc>{loc}</loc><priority>0.5</priority></url>" for loc in locs)
    return URLSET.format(entries=entries)


def sitemapindex(*locs):
    entries = "\n".join(f"  <sitemap><loc>{loc}</loc></sitemap>" for loc in locs)
    return SITEMAPINDEX.format(entries=entries)


def make_response(url, status=200, body=b""):
    resp = requests.Response()
    resp.url = url
    resp.status_code = status
    resp.encoding = "utf-8"
    resp._content = body.encode("utf-8") if isinstance(body, str) else body
    return resp


class FakeSession:
    """Stands in for requests.Session: serves canned bodies and records every GET."""

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append(url)
        if url not in self.pages:
            raise requests.ConnectionError(f"Failed to resolve {url}")
        page = self.pages[url]
        if isinstance(page, tuple):
            status, body = page
        else:
            status, body = 200, page
        return make_response(url, status, body)


def write_pdf(path, sizes):
    """Write a PDF with one blank page per (width, height) in ``sizes``."""
    writer = PdfWriter()
    for width, height in sizes:
        writer.add_blank_page(width=width, height=height)
    path = Path(path)
    with open(path, "wb") as f:
        writer.write(f)
    return path


def page_widths(path):
    return [round(float(page.mediabox.width)) for page in PdfReader(str(path)).pages]


@pytest.fixture
def fake_browser():
    browser = mock.MagicMock(name="browser")
    launches = []

    @contextmanager
    def launch():
        launches.append(browser)
        yield browser

    launch.launches = launches
    launch.browser = browser
    return launch
