"""Textual dashboard for skill-porter."""

from .app import SkillPorterTUI, run_tui_mode

__all__ = ["SkillPorterTUI", "run_tui_mode"]
