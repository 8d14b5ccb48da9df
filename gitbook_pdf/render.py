"""
Headless-browser side: load a page, hide the site chrome, print it to PDF.

One browser page is opened per run and reused for every URL.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import (
    DEVICE_SCALE_FACTOR,
    HIDE_SELECTORS,
    PDF_OPTIONS,
    USER_AGENT,
    VIEWPORT,
    WAIT_UNTIL,
)

logger = logging.getLogger(__name__)

# Hides (does not remove) the first element matching the selector.
HIDE_JS = """
(selector) => {
  const node = document.querySelector(selector);
  if (!node) {
    return false;
  }
  node.style.display = "none";
  return true;
}
"""


@dataclass
class RenderOutcome:
    url: str
    path: Path
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def open_page(browser):
    """New context + page with the fixed viewport, 2x scale and blank user agent."""
    context = browser.new_context(
        viewport=VIEWPORT,
        device_scale_factor=DEVICE_SCALE_FACTOR,
        user_agent=USER_AGENT,
    )
    return context.new_page()


def hide_chrome(page, selectors=None) -> int:
    """Hide every configured element that is present. Returns how many were hidden."""
    if selectors is None:
        selectors = HIDE_SELECTORS
    hidden = 0
    for name, selector in selectors.items():
        if page.evaluate(HIDE_JS, selector):
            hidden += 1
        else:
            logger.debug(f"   No {name} on page ({selector})")
    return hidden


def _discard(path: Path):
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning(f"   Could not remove stale {path}: {exc}")


def render_page(page, url: str, output_path, selectors=None) -> RenderOutcome:
    """
    Print ``url`` to ``output_path``. Never raises: failures come back as an
    outcome with ``error`` set and no file left at ``output_path``.
    """
    output_path = Path(output_path)
    try:
        page.set_viewport_size(VIEWPORT)
        page.goto(url, wait_until=WAIT_UNTIL)
        hide_chrome(page, selectors)
        page.pdf(path=str(output_path), **PDF_OPTIONS)
    except Exception as exc:
        logger.error(f"Failed to take PDF for: {url} ({exc})")
        _discard(output_path)
        return RenderOutcome(url, output_path, error=str(exc) or type(exc).__name__)

    logger.info(f"Saved PDF for: {url} at {output_path}")
    return RenderOutcome(url, output_path)
