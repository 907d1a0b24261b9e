"""SVG parser — walks the document and hands cleaned path data to the engine.

Only ``<path>`` elements directly under ``<svg>`` or nested inside ``<g>``
groups are visited, in document order. Everything else is ignored.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator

from cubicpath.engine.context import Path
from cubicpath.engine.options import ParserOptions
from cubicpath.engine.pipeline import BatchResult, PathElement, create_pipeline

logger = logging.getLogger(__name__)

GROUP_TAG = "g"
PATH_TAG = "path"


def clean_path_data(d: str) -> str:
    """Replace commas with spaces, collapse whitespace runs and trim."""
    return " ".join(d.replace(",", " ").split())


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _walk(element: ET.Element) -> Iterator[PathElement]:
    for child in element:
        if not isinstance(child.tag, str):
            continue
        tag = _strip_ns(child.tag)
        if tag == GROUP_TAG:
            yield from _walk(child)
        elif tag == PATH_TAG:
            yield PathElement(id=child.get("id", ""), d=clean_path_data(child.get("d", "")))


def iter_path_elements(svg_text: str) -> Iterator[PathElement]:
    """Yield every path element of the document in order.

    Raises ``xml.etree.ElementTree.ParseError`` on malformed markup.
    """
    root = ET.fromstring(svg_text)
    if _strip_ns(root.tag) != "svg":
        logger.warning("Root element is <%s>, not <svg>; no paths extracted", _strip_ns(root.tag))
        return
    yield from _walk(root)


def parse_svg(
    svg_text: str,
    options: ParserOptions | None = None,
    workers: int = 1,
) -> list[Path]:
    """Parse every path of an SVG document. The first malformed path aborts."""
    elements = list(iter_path_elements(svg_text))
    logger.info("Found %d path elements", len(elements))
    return create_pipeline(options, workers).run(elements)


def parse_svg_isolated(
    svg_text: str,
    options: ParserOptions | None = None,
    workers: int = 1,
) -> BatchResult:
    """Parse every path of an SVG document, collecting per-path failures."""
    elements = list(iter_path_elements(svg_text))
    logger.info("Found %d path elements", len(elements))
    return create_pipeline(options, workers).run_isolated(elements)
