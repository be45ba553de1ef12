"""Messages consumed by the dashboard controller.

Intents come from the user; events come back from discovery and conversion
jobs. Both travel through the same control-loop mailbox.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from skills.types import SkillDir


class Intent(str, Enum):
    """User intents understood by the controller."""

    SUBMIT = "submit"
    BACK = "back"
    QUIT = "quit"
    CURSOR_UP = "cursor_up"
    CURSOR_DOWN = "cursor_down"
    CONVERT_SELECTED = "convert_selected"
    CONVERT_GEMINI = "convert_gemini"
    CONVERT_CLAUDE = "convert_claude"
    CONVERT_ALL = "convert_all"
    RESCAN = "rescan"


@dataclass(frozen=True)
class DiscoveryCompleted:
    """A scan finished. ``error`` is set when the scan failed and ``skills`` is empty."""

    skills: list[SkillDir] = field(default_factory=list)
    error: Optional[str] = None


@dataclass(frozen=True)
class ConversionSucceeded:
    path: str
    output: str


@dataclass(frozen=True)
class ConversionFailed:
    path: str
    error: str


JobEvent = Union[DiscoveryCompleted, ConversionSucceeded, ConversionFailed]
Message = Union[Intent, DiscoveryCompleted, ConversionSucceeded, ConversionFailed]
