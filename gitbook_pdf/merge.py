"""
Concatenate per-page PDFs into one document with PyPDF2.

A file that is missing or unreadable is logged and left out; everything that
could be read is still written. If nothing could be read, no output is written.
"""

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from PyPDF2 import PdfReader, PdfWriter

logger = logging.getLogger(__name__)


@dataclass
class MergeReport:
    output_path: Path
    pages_written: int = 0
    merged: List[Path] = field(default_factory=list)
    failed: List[Path] = field(default_factory=list)

    @property
    def written(self) -> bool:
        return self.pages_written > 0


def read_pdf(path) -> PdfReader:
    """Load the whole file into memory so no handle stays open while merging."""
    with open(path, "rb") as f:
        data = f.read()
    return PdfReader(io.BytesIO(data))


def combine_pdfs(pdf_paths, output_path) -> MergeReport:
    output_path = Path(output_path)
    report = MergeReport(output_path)
    writer = PdfWriter()
    page_count = 0

    for pdf_path in pdf_paths:
        pdf_path = Path(pdf_path)
        try:
            reader = read_pdf(pdf_path)
            pages = list(reader.pages)
        except Exception as e:
            logger.error(f"   Error merging {pdf_path}: {e}")
            report.failed.append(pdf_path)
            continue
        for page in pages:
            writer.add_page(page)
        page_count += len(pages)
        report.merged.append(pdf_path)

    if not page_count:
        logger.warning("No PDFs were appended, so we did not create a combined file.")
        return report

    try:
        with open(output_path, "wb") as f_out:
            writer.write(f_out)
    except OSError as e:
        logger.error(f"Could not write combined PDF '{output_path}': {e}")
        return report

    report.pages_written = page_count
    logger.info(f"Combined PDF saved to: {output_path} ({page_count} pages from {len(report.merged)} files)")
    return report
