"""cubicpath path data engine."""

from cubicpath.engine.context import CursorState, Path, PathData, Point
from cubicpath.engine.errors import (
    EmptyCoordinateError,
    InvalidCoordinateError,
    InvalidXError,
    InvalidYError,
    PathDataError,
    UnsupportedCommandError,
)
from cubicpath.engine.interpreter import PathInterpreter, interpret
from cubicpath.engine.optimizer import optimize_segments
from cubicpath.engine.options import ParserOptions
from cubicpath.engine.pipeline import BatchResult, PathElement, PathPipeline, create_pipeline
from cubicpath.engine.registry import CommandKind, command, get_registry

__all__ = [
    "Point",
    "PathData",
    "Path",
    "CursorState",
    "PathDataError",
    "EmptyCoordinateError",
    "InvalidCoordinateError",
    "InvalidXError",
    "InvalidYError",
    "UnsupportedCommandError",
    "PathInterpreter",
    "interpret",
    "optimize_segments",
    "ParserOptions",
    "BatchResult",
    "PathElement",
    "PathPipeline",
    "create_pipeline",
    "CommandKind",
    "command",
    "get_registry",
]
