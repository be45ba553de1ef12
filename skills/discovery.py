"""Skill directory discovery.

A directory is a skill when it holds a ``SKILL.md`` (Claude) and/or a
``gemini-extension.json`` (Gemini) marker file. Skills are assumed not to
nest, so the walk never descends into a directory once it is classified.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Optional

from utils import get_logger

from .parser import CLAUDE_MARKER, GEMINI_MARKER, read_skill_description
from .types import ConversionStatus, ConversionTarget, SkillDir, SkillPlatform

logger = get_logger(__name__)


def _is_marker(path: str) -> bool:
    return os.path.exists(path) and not os.path.isdir(path)


def classify_directory(path: str) -> Optional[SkillPlatform]:
    """Classify a directory by its marker files, or return None if it is not a skill."""
    is_claude = _is_marker(os.path.join(path, CLAUDE_MARKER))
    is_gemini = _is_marker(os.path.join(path, GEMINI_MARKER))

    if is_claude and is_gemini:
        return SkillPlatform.UNIVERSAL
    if is_claude:
        return SkillPlatform.CLAUDE
    if is_gemini:
        return SkillPlatform.GEMINI
    return None


def _skip_unreadable(error: OSError) -> None:
    if isinstance(error, PermissionError):
        logger.warning(f"Skipping unreadable directory: {error.filename}")
        return
    raise error


def walk_skill_dirs(root: str, recursive: bool = True) -> list[tuple[str, SkillPlatform]]:
    """Walk ``root`` depth-first in lexical order and collect skill directories.

    With ``recursive=False`` only ``root`` and its immediate children are
    inspected. Unreadable directories are skipped; any other OSError (for
    example a missing root) propagates.
    """
    root = os.path.abspath(root)
    found: list[tuple[str, SkillPlatform]] = []
    seen: set[str] = set()

    for dirpath, dirnames, _ in os.walk(root, onerror=_skip_unreadable):
        dirnames.sort()

        platform = classify_directory(dirpath)
        if platform is not None:
            dirnames[:] = []
            if dirpath in seen:
                continue
            seen.add(dirpath)
            found.append((dirpath, platform))
            continue

        if not recursive and dirpath != root:
            dirnames[:] = []

    return found


async def discover_skills(root: str, recursive: bool = True) -> list[SkillDir]:
    """Discover skills under ``root`` as Pending entities with an unresolved target."""
    entries = await asyncio.to_thread(walk_skill_dirs, root, recursive)

    skills: list[SkillDir] = []
    for path, platform in entries:
        skills.append(
            SkillDir(
                name=os.path.basename(path),
                path=path,
                platform=platform,
                status=ConversionStatus.PENDING,
                target=ConversionTarget.AUTO,
                description=await read_skill_description(Path(path)),
            )
        )

    logger.info(f"Discovered {len(skills)} skill(s) under {root} (recursive={recursive})")
    return skills
