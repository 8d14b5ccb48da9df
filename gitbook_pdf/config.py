"""
Settings for the GitBook-to-PDF exporter.

Everything is a plain constant: edit this file to point the exporter at a
different site or to change which page elements are hidden before printing.
"""

import logging

################################################################################
# CONFIG
################################################################################

# Root of the documentation site. The sitemap is always <SITE_URL>/sitemap.xml
SITE_URL = "https://renownedgames.gitbook.io/ai-tree"

# Folder that receives one subfolder per site
BASE_DIR = "pdfs"

# Seconds to wait for the sitemap (and any sub-sitemap) to download
SITEMAP_TIMEOUT = 30

HEADERS = {
    "Accept": "application/xml,text/xml;q=0.9,*/*;q=0.8",
}

# Browser settings. A 2x scale factor keeps images crisp in the PDF.
VIEWPORT = {"width": 1280, "height": 800}
DEVICE_SCALE_FACTOR = 2
USER_AGENT = ""

# "networkidle" waits until there has been no network traffic for 500 ms
WAIT_UNTIL = "networkidle"

# Keyword arguments passed straight to page.pdf()
PDF_OPTIONS = {
    "format": "A4",
    "print_background": True,
    "scale": 1,
    "prefer_css_page_size": True,
}

# GitBook chrome we hide (display: none) before printing. Only the first match
# of each selector is hidden. These follow GitBook's generated class names, so
# swap the table out when targeting a different site.
HIDE_SELECTORS = {
    "app bar": "div.appBarClassName",
    "scroll helper": ".scroll-nojump",
    "side menu": "aside.relative.group.flex.flex-col.basis-full.bg-light",
    "search button": "div.flex.md\\:w-56.grow-0.shrink-0.justify-self-end",
    "next page block": (
        "div.flex.flex-col.md\\:flex-row.mt-6.gap-2.max-w-3xl.mx-auto.page-api-block\\:ml-0"
    ),
    "last updated": (
        "div.flex.flex-row.items-center.mt-6.max-w-3xl.mx-auto.page-api-block\\:ml-0"
    ),
}

################################################################################
# LOGGING
################################################################################

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level=logging.INFO):
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
