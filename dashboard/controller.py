"""Dashboard controller: the state machine behind the skill-porter dashboard.

The controller owns the skill list, cursor, counters and session config. It
is a plain synchronous object: intents and job events are applied one at a
time by the control loop, which is what makes path-keyed lookups safe
without locks. Handling an intent never waits on a conversion; it returns
the jobs to launch and the caller runs them.
"""

import os
from dataclasses import replace
from enum import Enum
from typing import Callable, Dict, List, Optional

from config import AppConfig
from skills.types import ConversionStatus, ConversionTarget, SkillDir, Summary
from utils import get_logger

from .events import (
    ConversionFailed,
    ConversionSucceeded,
    DiscoveryCompleted,
    Intent,
    JobEvent,
)
from .jobs import ConversionJob, DiscoveryJob, Job

logger = get_logger(__name__)


class SessionState(Enum):
    CONFIGURING = "configuring"
    BROWSING = "browsing"


_TARGET_CYCLE = {
    ConversionTarget.AUTO: ConversionTarget.GEMINI,
    ConversionTarget.GEMINI: ConversionTarget.CLAUDE,
    ConversionTarget.CLAUDE: ConversionTarget.AUTO,
}

# Statuses from which the plain convert intent may (re)dispatch a skill.
_CONVERTIBLE = (ConversionStatus.PENDING, ConversionStatus.FAILED)


class DashboardController:
    """State machine for one dashboard session.

    Attributes:
        config: Session settings edited on the setup screen
        state: CONFIGURING until a scan is submitted, then BROWSING
        skills: Discovered skills, replaced wholesale by every scan
        cursor: Index of the selected skill
        success_count: Conversions reported successful since the last scan
        fail_count: Conversions reported failed since the last scan
        scanning: True while a discovery job is outstanding
        scan_error: Message of the last failed scan, if any
        output_dir_error: Message of the last failed output directory creation
        quit_requested: Set once the user asks to quit
    """

    def __init__(self, config: AppConfig):
        self.config = config
        self.state = SessionState.CONFIGURING
        self.skills: List[SkillDir] = []
        self.cursor = 0
        self.success_count = 0
        self.fail_count = 0
        self.scanning = False
        self.scan_error: Optional[str] = None
        self.output_dir_error: Optional[str] = None
        self.quit_requested = False

        self._configuring_intents: Dict[Intent, Callable[[], List[Job]]] = {
            Intent.SUBMIT: self._submit,
        }
        self._browsing_intents: Dict[Intent, Callable[[], List[Job]]] = {
            Intent.BACK: self._back,
            Intent.CURSOR_UP: self._cursor_up,
            Intent.CURSOR_DOWN: self._cursor_down,
            Intent.CONVERT_SELECTED: self._convert_selected,
            Intent.CONVERT_GEMINI: lambda: self._force_convert(ConversionTarget.GEMINI),
            Intent.CONVERT_CLAUDE: lambda: self._force_convert(ConversionTarget.CLAUDE),
            Intent.CONVERT_ALL: self._convert_all_pending,
            Intent.RESCAN: self._rescan,
        }

    # ------------------------------------------------------------------ queries

    @property
    def selected(self) -> Optional[SkillDir]:
        if 0 <= self.cursor < len(self.skills):
            return self.skills[self.cursor]
        return None

    def summary(self) -> Summary:
        running = sum(1 for s in self.skills if s.status == ConversionStatus.RUNNING)
        return Summary(
            total=len(self.skills),
            success=self.success_count,
            failed=self.fail_count,
            running=running,
        )

    def find_skill(self, path: str) -> Optional[SkillDir]:
        """Return the first skill whose path equals ``path``."""
        for skill in self.skills:
            if skill.path == path:
                return skill
        return None

    # ------------------------------------------------------- setup-form edits

    def set_paths(self, scan_root: str, out_base_dir: str) -> None:
        self.config.scan_root = scan_root.strip()
        self.config.out_base_dir = out_base_dir.strip()

    def set_recursive(self, recursive: bool) -> None:
        self.config.recursive = recursive

    def cycle_default_target(self) -> ConversionTarget:
        self.config.default_target = _TARGET_CYCLE[self.config.default_target]
        return self.config.default_target

    # ------------------------------------------------------------------ intents

    def handle_intent(self, intent: Intent) -> List[Job]:
        """Apply a user intent and return the jobs it launches.

        Intents that do not apply to the current state are ignored.
        """
        if intent == Intent.QUIT:
            self.quit_requested = True
            return []

        if self.state == SessionState.CONFIGURING:
            handler = self._configuring_intents.get(intent)
        else:
            handler = self._browsing_intents.get(intent)

        if handler is None:
            logger.debug(f"Ignoring intent {intent.value} in state {self.state.value}")
            return []
        return handler()

    def _submit(self) -> List[Job]:
        if not self.config.scan_root:
            self.config.scan_root = "."

        self.output_dir_error = None
        if self.config.out_base_dir:
            try:
                os.makedirs(self.config.out_base_dir, exist_ok=True)
            except OSError as e:
                # Recorded for display only; scanning continues.
                logger.warning(f"Could not create output directory {self.config.out_base_dir}: {e}")
                self.output_dir_error = str(e)

        self.state = SessionState.BROWSING
        logger.info(
            f"Scanning {self.config.scan_root} (recursive={self.config.recursive}, "
            f"default target={self.config.default_target.value}, "
            f"output={self.config.out_base_dir or 'in-place'})"
        )
        return [self._discovery_job()]

    def _back(self) -> List[Job]:
        self.state = SessionState.CONFIGURING
        return []

    def _cursor_up(self) -> List[Job]:
        if self.cursor > 0:
            self.cursor -= 1
        return []

    def _cursor_down(self) -> List[Job]:
        if self.cursor < len(self.skills) - 1:
            self.cursor += 1
        return []

    def _convert_selected(self) -> List[Job]:
        skill = self.selected
        if skill is None or skill.status not in _CONVERTIBLE:
            return []
        return [self._dispatch(skill, ConversionTarget.AUTO)]

    def _force_convert(self, target: ConversionTarget) -> List[Job]:
        skill = self.selected
        if skill is None:
            return []
        return [self._dispatch(skill, target)]

    def _convert_all_pending(self) -> List[Job]:
        pending = [s for s in self.skills if s.status == ConversionStatus.PENDING]
        return [self._dispatch(skill, ConversionTarget.AUTO) for skill in pending]

    def _rescan(self) -> List[Job]:
        self.skills = []
        self.cursor = 0
        self.success_count = 0
        self.fail_count = 0
        self.scan_error = None
        return [self._discovery_job()]

    def _discovery_job(self) -> DiscoveryJob:
        self.scanning = True
        return DiscoveryJob(root=self.config.scan_root, recursive=self.config.recursive)

    def _dispatch(self, skill: SkillDir, override: ConversionTarget) -> ConversionJob:
        """Mark ``skill`` Running and build its job from a snapshot."""
        skill.status = ConversionStatus.RUNNING
        skill.error_log = ""
        skill.output_path = ""
        logger.debug(f"Dispatching {skill.path} (override={override.value})")
        return ConversionJob(
            skill=replace(skill),
            override=override,
            default_target=self.config.default_target,
            out_base_dir=self.config.out_base_dir,
            converter=self.config.converter,
        )

    # ------------------------------------------------------------------- events

    def apply_event(self, event: JobEvent) -> None:
        """Apply a job completion event. Events for unknown paths are dropped."""
        if isinstance(event, DiscoveryCompleted):
            self.skills = list(event.skills)
            self.cursor = 0
            self.success_count = 0
            self.fail_count = 0
            self.scanning = False
            self.scan_error = event.error
            return

        skill = self.find_skill(event.path)
        if skill is None:
            logger.debug(f"Dropping result for {event.path}: no longer listed")
            return

        if isinstance(event, ConversionSucceeded):
            skill.status = ConversionStatus.SUCCESS
            skill.output_path = event.output
            self.success_count += 1
        elif isinstance(event, ConversionFailed):
            skill.status = ConversionStatus.FAILED
            skill.error_log = event.error
            self.fail_count += 1
