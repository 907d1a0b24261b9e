"""Path data interpreter — turns a cleaned ``d`` string into raw cubic segments.

The string is scanned once, left to right. Each command letter closes the run
of the previous command and opens its own; the final run is flushed after the
scan. Close-path commands are applied the moment they are seen.
"""

from __future__ import annotations

import logging

import cubicpath.engine.commands  # noqa: F401  (registers the builders)
from cubicpath.engine.context import CursorState, PathData
from cubicpath.engine.coordinates import split_tokens
from cubicpath.engine.errors import UnsupportedCommandError
from cubicpath.engine.registry import UNSUPPORTED_LETTERS, CommandRegistry, CommandSpec, get_registry

logger = logging.getLogger(__name__)


class PathInterpreter:
    """Interprets one path's data. Create a new instance per path."""

    def __init__(self, data: str, registry: CommandRegistry | None = None) -> None:
        self.data = data
        self.registry = registry or get_registry()
        self.cursor = CursorState()
        self.segments: list[PathData] = []
        # Command owning the currently open run; None while idle or after a close
        self._pending: CommandSpec | None = None
        self._absolute = False
        self._run_start = 0

    def run(self) -> list[PathData]:
        letters = self.registry.letters
        for i, char in enumerate(self.data):
            if char in UNSUPPORTED_LETTERS:
                raise UnsupportedCommandError(char)
            if char not in letters:
                continue

            self._flush(i)
            spec = self.registry.lookup(char)
            absolute = spec.is_absolute(char)
            if spec.group_size == 0:
                self._emit(spec, [], absolute)
                self._pending = None
            else:
                self._pending = spec
                self._absolute = absolute
            self._run_start = i + 1

        self._flush(len(self.data))
        return self.segments

    def _flush(self, end: int) -> None:
        if self._pending is None:
            return
        tokens = split_tokens(self.data[self._run_start:end])
        self._emit(self._pending, tokens, self._absolute)

    def _emit(self, spec: CommandSpec, tokens: list[str], absolute: bool) -> None:
        produced = spec.build(tokens, absolute, self.cursor)
        logger.debug(
            "%s: %d tokens -> %d segments",
            spec.letter(absolute),
            len(tokens),
            len(produced),
        )
        self.segments.extend(produced)


def interpret(data: str, registry: CommandRegistry | None = None) -> list[PathData]:
    """Interpret cleaned path data into raw segments, without optimization."""
    return PathInterpreter(data, registry).run()
