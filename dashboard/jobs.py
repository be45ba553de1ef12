"""Units of asynchronous work handed out by the dashboard controller.

A job never touches controller state. It carries everything it needs from
dispatch time and reports exactly one event when it finishes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

from conversion import (
    ConversionError,
    build_convert_command,
    execute_command,
    resolve_target,
)
from skills.discovery import discover_skills
from skills.types import ConversionTarget, SkillDir
from utils import get_logger

from .events import ConversionFailed, ConversionSucceeded, DiscoveryCompleted

logger = get_logger(__name__)

CONVERSION_TIMEOUT = 5 * 60.0
DEFAULT_CONVERTER = "skill-porter"


@dataclass(frozen=True)
class DiscoveryJob:
    root: str
    recursive: bool = True

    async def run(self) -> DiscoveryCompleted:
        try:
            skills = await discover_skills(self.root, self.recursive)
        except OSError as e:
            logger.error(f"Discovery under {self.root} failed: {e}")
            return DiscoveryCompleted(skills=[], error=str(e))
        return DiscoveryCompleted(skills=skills)

    def failed(self, error: BaseException) -> DiscoveryCompleted:
        return DiscoveryCompleted(skills=[], error=str(error))


@dataclass(frozen=True)
class ConversionJob:
    """Convert one skill.

    ``skill`` is a private copy taken at dispatch time, so later changes to
    the controller's entity are invisible to the job.
    """

    skill: SkillDir
    override: ConversionTarget = ConversionTarget.AUTO
    default_target: ConversionTarget = ConversionTarget.AUTO
    out_base_dir: str = ""
    converter: str = DEFAULT_CONVERTER
    timeout: float = CONVERSION_TIMEOUT

    @property
    def path(self) -> str:
        return self.skill.path

    def output_dir(self) -> str:
        """Per-skill output directory, or "" to convert in place."""
        if not self.out_base_dir:
            return ""
        return os.path.join(self.out_base_dir, self.skill.name)

    async def run(self) -> Union[ConversionSucceeded, ConversionFailed]:
        target = resolve_target(self.skill, self.override, self.default_target)

        try:
            args = build_convert_command(self.skill.path, target, self.output_dir())
        except ConversionError as e:
            logger.error(f"Could not build command for {self.skill.path}: {e}")
            return ConversionFailed(path=self.skill.path, error=str(e))

        logger.info(f"Converting {self.skill.name} ({self.skill.platform.value}) to {target.value}")
        try:
            output = await execute_command(self.converter, args, timeout=self.timeout)
        except ConversionError as e:
            logger.error(f"Conversion of {self.skill.path} failed: {e}")
            return ConversionFailed(path=self.skill.path, error=str(e))

        logger.info(f"Converted {self.skill.name}")
        return ConversionSucceeded(path=self.skill.path, output=output)

    def failed(self, error: BaseException) -> ConversionFailed:
        return ConversionFailed(path=self.skill.path, error=str(error))


Job = Union[DiscoveryJob, ConversionJob]
