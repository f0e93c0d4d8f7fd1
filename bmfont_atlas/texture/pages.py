"""
Texture Pages - Checks a descriptor against its texture page images.

Only image headers are read; pixel data is never decoded.
"""

import logging
import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from PIL import Image

from ..core.parser import FontMetadata

logger = logging.getLogger('BMFont.pages')

ERROR = "error"
WARNING = "warning"


@dataclass
class PageIssue:
    """A problem found while checking texture pages."""
    severity: str  # ERROR or WARNING
    message: str
    page_id: Optional[int] = None

    def __str__(self) -> str:
        return f"[{self.severity}] {self.message}"


def read_page_size(path: str) -> Tuple[int, int]:
    """
    Read the pixel size of a page image.

    Raises:
        OSError: if the file is missing or is not a readable image
    """
    # Image.open only parses the header until pixels are requested
    with Image.open(path) as img:
        return img.size


def verify_pages(metadata: FontMetadata, base_dir: str) -> List[PageIssue]:
    """
    Check texture pages and glyph rectangles.

    Args:
        metadata: Parsed font metadata
        base_dir: Directory page file names are relative to

    Returns:
        Issues found, in discovery order (empty if everything checks out)
    """
    issues: List[PageIssue] = []
    common = metadata.common

    if common.pages != len(metadata.pages):
        issues.append(PageIssue(
            WARNING, f"common declares {common.pages} pages but {len(metadata.pages)} are listed"
        ))

    # page id -> (width, height) of the area glyphs may use
    page_bounds: Dict[int, Tuple[int, int]] = {}
    for page in metadata.pages:
        if page.id in page_bounds:
            issues.append(PageIssue(ERROR, f"duplicate page id {page.id}", page.id))
            continue

        bounds = (common.scale_w, common.scale_h)
        path = os.path.join(base_dir, page.file)
        try:
            size = read_page_size(path)
        except OSError as e:
            logger.debug(f"Cannot read page {page.id} at {path}: {e}")
            issues.append(PageIssue(ERROR, f"page {page.id}: cannot read {page.file!r}", page.id))
        else:
            logger.debug(f"Page {page.id}: {page.file} is {size[0]}x{size[1]}")
            if common.scale_w and common.scale_h and size != (common.scale_w, common.scale_h):
                issues.append(PageIssue(
                    WARNING,
                    f"page {page.id}: image is {size[0]}x{size[1]}, "
                    f"common declares {common.scale_w}x{common.scale_h}",
                    page.id,
                ))
            bounds = size
        page_bounds[page.id] = bounds

    for glyph in metadata.chars:
        bounds = page_bounds.get(glyph.page)
        if bounds is None:
            issues.append(PageIssue(ERROR, f"char {glyph.id}: no page {glyph.page}", glyph.page))
            continue

        width, height = bounds
        # Zero-sized bounds mean the size is unknown
        if not width or not height:
            continue
        if glyph.x + glyph.width > width or glyph.y + glyph.height > height:
            issues.append(PageIssue(
                ERROR,
                f"char {glyph.id}: rectangle {glyph.x},{glyph.y} {glyph.width}x{glyph.height} "
                f"exceeds page {glyph.page} ({width}x{height})",
                glyph.page,
            ))

    return issues
