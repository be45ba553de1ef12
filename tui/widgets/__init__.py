"""Widgets for the skill-porter TUI."""

from .header import SessionHeader
from .skill_list import DetailsPanel, SkillList, SummaryBar

__all__ = ["DetailsPanel", "SessionHeader", "SkillList", "SummaryBar"]
