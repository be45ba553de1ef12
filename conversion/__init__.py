"""Command construction and execution for the skill-porter converter."""

from .command_builder import build_convert_command, resolve_target
from .errors import (
    ConversionError,
    ExecutionFailedError,
    InvalidInputError,
    UnresolvedTargetError,
    UnsupportedTargetError,
)
from .executor import execute_command

__all__ = [
    "ConversionError",
    "ExecutionFailedError",
    "InvalidInputError",
    "UnresolvedTargetError",
    "UnsupportedTargetError",
    "build_convert_command",
    "execute_command",
    "resolve_target",
]
