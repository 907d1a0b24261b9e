"""Path data failures.

Every error names the command letter that was active when parsing failed and,
where there is one, the offending token or run. All of them abort the path.
"""

from __future__ import annotations

from typing import Any


class PathDataError(ValueError):
    """Base class for malformed ``d`` attribute data."""

    kind = "path_data"

    def __init__(self, command: str, data: str = "") -> None:
        self.command = command
        self.data = data
        super().__init__(self._message())

    def _message(self) -> str:
        return f"{self.command} is not valid path data"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "command": self.command,
            "data": self.data,
            "message": str(self),
        }


class EmptyCoordinateError(PathDataError):
    kind = "empty_coordinate"

    def _message(self) -> str:
        return f"{self.command} does not contain coordinate data"


class InvalidCoordinateError(PathDataError):
    """Token count breaks the command's arity rule."""

    kind = "invalid_coordinate"

    def __init__(self, command: str, tokens: list[str]) -> None:
        super().__init__(command, " ".join(tokens))

    def _message(self) -> str:
        return f"{self.command} does not contain a valid coordinate or set of coordinates: {self.data}"


class InvalidXError(PathDataError):
    kind = "invalid_x"

    def _message(self) -> str:
        return f"{self.command} does not contain a valid x: {self.data}"


class InvalidYError(PathDataError):
    kind = "invalid_y"

    def _message(self) -> str:
        return f"{self.command} does not contain a valid y: {self.data}"


class UnsupportedCommandError(PathDataError):
    kind = "unsupported_command"

    def _message(self) -> str:
        return f"{self.command} is not supported"
