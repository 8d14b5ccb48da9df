"""Export a GitBook site to per-page PDFs plus one combined PDF."""

__version__ = "1.0.0"
