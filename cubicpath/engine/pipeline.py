"""Path pipeline — parses a batch of path elements in document order.

Each path is interpreted and optimized independently with its own cursor, so
elements can be fanned out over worker threads without locking. ``run`` keeps
the reference behavior (the first failure in document order aborts the
batch); ``run_isolated`` records failures per element and carries on.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TypeVar

from cubicpath.engine.context import Path
from cubicpath.engine.errors import PathDataError
from cubicpath.engine.interpreter import interpret
from cubicpath.engine.optimizer import optimize_segments
from cubicpath.engine.options import ParserOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class PathElement:
    """A ``<path>`` element as handed over by the document walk."""

    id: str = ""
    # Cleaned ``d`` attribute: no commas, single spaces, trimmed
    d: str = ""


@dataclass
class BatchResult:
    paths: list[Path] = field(default_factory=list)
    # Failed elements keyed by id, or "#<index>" when the element has none
    errors: dict[str, PathDataError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


class PathPipeline:
    """Orchestrates interpretation and optimization for many paths."""

    def __init__(self, options: ParserOptions | None = None, workers: int = 1) -> None:
        self.options = options or ParserOptions()
        self.workers = max(1, workers)

    def parse_path(self, element: PathElement) -> Path:
        """Parse a single element. Raises the first PathDataError encountered."""
        t0 = time.perf_counter()
        raw = interpret(element.d)
        data = optimize_segments(raw, self.options.slope_tolerance)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug(
            "  path %r: %d segments (%d raw) in %.2fms",
            element.id,
            len(data),
            len(raw),
            elapsed,
        )
        return Path(id=element.id, data=data)

    def run(self, elements: Iterable[PathElement]) -> list[Path]:
        """Parse all elements; the first error in document order aborts the batch."""
        start = time.perf_counter()
        parsed = self._map(self.parse_path, list(elements))
        paths = [p for p in parsed if p.data]

        total = (time.perf_counter() - start) * 1000
        logger.info("Parsed %d/%d paths in %.1fms", len(paths), len(parsed), total)
        return paths

    def run_isolated(self, elements: Iterable[PathElement]) -> BatchResult:
        """Parse all elements, collecting per-element failures instead of aborting."""
        start = time.perf_counter()
        elements = list(elements)
        result = BatchResult()

        for index, (path, error) in enumerate(self._map(self._attempt, elements)):
            if error is not None:
                key = elements[index].id or f"#{index}"
                if key in result.errors:
                    key = f"{key}#{index}"
                result.errors[key] = error
                logger.warning("  path %s FAILED: %s", key, error)
            elif path.data:
                result.paths.append(path)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Parsed %d paths (%d failed) in %.1fms",
            len(result.paths),
            len(result.errors),
            total,
        )
        return result

    def _attempt(self, element: PathElement) -> tuple[Path | None, PathDataError | None]:
        try:
            return self.parse_path(element), None
        except PathDataError as e:
            return None, e

    def _map(self, fn: Callable[[PathElement], T], elements: list[PathElement]) -> list[T]:
        if self.workers == 1 or len(elements) < 2:
            return [fn(e) for e in elements]
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            return list(pool.map(fn, elements))


def create_pipeline(options: ParserOptions | None = None, workers: int = 1) -> PathPipeline:
    """Factory function for creating a pipeline instance."""
    return PathPipeline(options=options, workers=workers)
