"""Command registry — every path command builder is a function registered via decorator.

Usage:
    @command(kind=CommandKind.LINE_TO, letters="Ll", group_size=2)
    def line_to(tokens: list[str], letter: str, cursor: CursorState) -> list[PathData]:
        ...

The interpreter looks builders up by letter and calls them through
`CommandSpec.build`, which checks the run against `group_size` first, so a
builder only ever sees a well-formed run plus the letter that introduced it.
Adding a command means writing one builder with the decorator; nothing else
changes.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from cubicpath.engine.errors import EmptyCoordinateError, InvalidCoordinateError

if TYPE_CHECKING:
    from cubicpath.engine.context import CursorState, PathData

logger = logging.getLogger(__name__)

Builder = Callable[[list[str], str, "CursorState"], "list[PathData]"]

# Quadratic, smooth and arc commands are rejected rather than approximated
UNSUPPORTED_LETTERS = frozenset("SsQqTtAa")


class CommandKind(enum.Enum):
    MOVE_TO = "moveto"
    LINE_TO = "lineto"
    HORIZONTAL_TO = "horizontal_lineto"
    VERTICAL_TO = "vertical_lineto"
    CURVE_TO = "curveto"
    CLOSE_PATH = "closepath"


@dataclass
class CommandSpec:
    kind: CommandKind
    letters: str
    fn: Builder
    # Tokens consumed per emitted step; 0 means the command carries no data
    group_size: int = 2
    description: str = ""

    @property
    def absolute_letter(self) -> str:
        return self.letters[0]

    @property
    def relative_letter(self) -> str:
        return self.letters[-1]

    def letter(self, absolute: bool) -> str:
        return self.absolute_letter if absolute else self.relative_letter

    def is_absolute(self, letter: str) -> bool:
        return letter.isupper()

    def build(self, tokens: list[str], absolute: bool, cursor: CursorState) -> list[PathData]:
        """Check the run against the command's arity, then run its builder."""
        letter = self.letter(absolute)
        if self.group_size:
            if not tokens:
                raise EmptyCoordinateError(letter)
            if len(tokens) % self.group_size != 0:
                raise InvalidCoordinateError(letter, tokens)
        return self.fn(tokens, letter, cursor)


class CommandRegistry:
    """Registry of command builders keyed by their letters."""

    def __init__(self) -> None:
        self._commands: dict[CommandKind, CommandSpec] = {}
        self._by_letter: dict[str, CommandSpec] = {}

    def register(self, spec: CommandSpec) -> None:
        if spec.kind in self._commands:
            raise ValueError(f"Duplicate command kind: {spec.kind.name}")
        for letter in spec.letters:
            if letter in UNSUPPORTED_LETTERS:
                raise ValueError(f"Unsupported command letter: {letter}")
            if letter in self._by_letter:
                raise ValueError(f"Duplicate command letter: {letter}")
        self._commands[spec.kind] = spec
        for letter in spec.letters:
            self._by_letter[letter] = spec
        logger.debug("Registered command %s (%s)", spec.kind.name, spec.letters)

    def get(self, kind: CommandKind) -> CommandSpec:
        return self._commands[kind]

    def lookup(self, letter: str) -> CommandSpec | None:
        return self._by_letter.get(letter)

    @property
    def letters(self) -> frozenset[str]:
        return frozenset(self._by_letter)

    def all(self) -> list[CommandSpec]:
        return list(self._commands.values())

    @property
    def count(self) -> int:
        return len(self._commands)


# Module-level singleton
_registry = CommandRegistry()


def get_registry() -> CommandRegistry:
    return _registry


def command(
    *,
    kind: CommandKind,
    letters: str,
    group_size: int = 2,
    description: str = "",
):
    """Decorator to register a command builder."""

    def decorator(fn: Builder):
        spec = CommandSpec(
            kind=kind,
            letters=letters,
            fn=fn,
            group_size=group_size,
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
