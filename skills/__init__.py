"""Skill data models. Discovery lives in skills.discovery."""

from .types import ConversionStatus, ConversionTarget, SkillDir, SkillPlatform, Summary

__all__ = [
    "ConversionStatus",
    "ConversionTarget",
    "SkillDir",
    "SkillPlatform",
    "Summary",
]
