"""
Export a whole GitBook site to PDF.

    python -m gitbook_pdf

Steps:
  1) read <SITE_URL>/sitemap.xml
  2) print every page to pdfs/<site>/<category>/page_<N>.pdf
  3) merge the pages that printed into pdfs/<site>/<site>_combined.pdf

Pages that fail to print are skipped and listed at the end; only a sitemap
that cannot be fetched or understood stops the run.
"""

import datetime
import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from playwright.sync_api import sync_playwright

from .categorize import category_of, site_name_of
from .config import BASE_DIR, SITE_URL, setup_logging
from .errors import SitemapError
from .merge import MergeReport, combine_pdfs
from .render import RenderOutcome, open_page, render_page
from .sitemap import fetch_sitemap, sitemap_url_for

logger = logging.getLogger(__name__)


@dataclass
class PageTarget:
    ordinal: int
    url: str
    category: str
    path: Path


@dataclass
class RunContext:
    """Everything one run needs to know: where output goes and what happened so far."""

    site_url: str
    base_dir: Path
    site_name: str
    site_dir: Path
    counter: int = 0
    outcomes: List[RenderOutcome] = field(default_factory=list)
    merge_report: Optional[MergeReport] = None

    @classmethod
    def create(cls, site_url=SITE_URL, base_dir=BASE_DIR):
        site_name = site_name_of(site_url)
        base_dir = Path(base_dir)
        return cls(site_url, base_dir, site_name, base_dir / site_name)

    @property
    def sitemap_url(self) -> str:
        return sitemap_url_for(self.site_url)

    @property
    def combined_path(self) -> Path:
        return self.site_dir / f"{self.site_name}_combined.pdf"

    @property
    def rendered(self) -> List[Path]:
        return [o.path for o in self.outcomes if o.ok]

    @property
    def skipped(self) -> List[RenderOutcome]:
        return [o for o in self.outcomes if not o.ok]

    def plan_target(self, url: str) -> PageTarget:
        """Claim the next page number for ``url``. No folder is created."""
        self.counter += 1
        category = category_of(url)
        path = self.site_dir / category / f"page_{self.counter}.pdf"
        return PageTarget(self.counter, url, category, path)

    def next_target(self, url: str) -> PageTarget:
        """Claim the next page number for ``url`` and make sure its folder exists."""
        target = self.plan_target(url)
        target.path.parent.mkdir(parents=True, exist_ok=True)
        return target


@contextmanager
def launch_browser(headless=True):
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=headless)
        try:
            yield browser
        finally:
            browser.close()


def process_pages(ctx: RunContext, urls, page, render=render_page) -> List[RenderOutcome]:
    """Print each URL in order. The page counter moves on even when a page fails."""
    total = len(urls)
    for i, url in enumerate(urls, start=1):
        target = ctx.plan_target(url)
        try:
            target.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error(f"Could not create folder for: {url} ({exc})")
            error = f"Could not create {target.path.parent}: {exc}"
            ctx.outcomes.append(RenderOutcome(url, target.path, error=error))
            continue
        logger.info(f"({i}/{total}) Rendering: {url} -> {target.path}")
        ctx.outcomes.append(render(page, url, target.path))
    return ctx.outcomes


def log_summary(ctx: RunContext, report: MergeReport):
    logger.info(f"Rendered {len(ctx.rendered)}/{len(ctx.outcomes)} page(s) for '{ctx.site_name}'")
    if ctx.skipped:
        logger.warning("Some pages were skipped:")
        for outcome in ctx.skipped:
            logger.warning(f"   - {outcome.url}: {outcome.error}")
    if report.failed:
        logger.warning("Some PDFs could not be merged:")
        for path in report.failed:
            logger.warning(f"   - {path}")


def run(site_url=SITE_URL, base_dir=BASE_DIR, session=None, launch=launch_browser,
        render=render_page) -> RunContext:
    start_time = datetime.datetime.now()
    ctx = RunContext.create(site_url, base_dir)
    ctx.site_dir.mkdir(parents=True, exist_ok=True)

    # Fatal errors surface here, before a browser is started.
    urls = fetch_sitemap(ctx.sitemap_url, session=session)
    if not urls:
        logger.warning(f"Sitemap {ctx.sitemap_url} lists no usable pages; nothing to do.")
        return ctx

    logger.info(f"Exporting {len(urls)} page(s) into {ctx.site_dir}")
    with launch() as browser:
        page = open_page(browser)
        process_pages(ctx, urls, page, render=render)

    ctx.merge_report = combine_pdfs(ctx.rendered, ctx.combined_path)
    log_summary(ctx, ctx.merge_report)
    logger.info(f"Elapsed: {datetime.datetime.now() - start_time}")
    return ctx


def main():
    setup_logging()
    try:
        run()
    except SitemapError as exc:
        logger.error(f"Error fetching or parsing sitemap: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
