"""Data models for discovered skills and their conversion state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SkillPlatform(str, Enum):
    """Format a skill directory is currently written for."""

    CLAUDE = "Claude"
    GEMINI = "Gemini"
    UNIVERSAL = "Universal"


class ConversionStatus(str, Enum):
    PENDING = "Pending"
    RUNNING = "Running"
    SUCCESS = "Success"
    FAILED = "Failed"


class ConversionTarget(str, Enum):
    """Platform a skill should be converted to.

    AUTO means "not resolved yet" and must never reach the command builder.
    """

    GEMINI = "Gemini"
    CLAUDE = "Claude"
    AUTO = "Auto"


@dataclass
class SkillDir:
    """A discovered skill directory and its conversion state.

    ``path`` is the identity key used to match conversion results.
    """

    name: str
    path: str
    platform: SkillPlatform
    status: ConversionStatus = ConversionStatus.PENDING
    target: ConversionTarget = ConversionTarget.AUTO
    output_path: str = ""
    error_log: str = ""
    description: str = ""


@dataclass(frozen=True)
class Summary:
    total: int
    success: int
    failed: int
    running: int = 0

    @property
    def pending(self) -> int:
        return max(self.total - self.success - self.failed, 0)
