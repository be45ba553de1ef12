"""Readers for the metadata stored in skill marker files."""

from __future__ import annotations

import json
from pathlib import Path

import aiofiles
import aiofiles.os
import yaml

CLAUDE_MARKER = "SKILL.md"
GEMINI_MARKER = "gemini-extension.json"


def split_frontmatter(text: str) -> tuple[dict[str, object], str]:
    lines = text.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}, text

    end_idx = None
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            end_idx = i
            break

    if end_idx is None:
        return {}, text

    yaml_text = "\n".join(lines[1:end_idx])
    body = "\n".join(lines[end_idx + 1 :])

    try:
        data = yaml.safe_load(yaml_text) or {}
    except yaml.YAMLError:
        return {}, text

    if not isinstance(data, dict):
        return {}, body

    return data, body


def parse_extension_manifest(text: str) -> dict[str, object]:
    """Parse gemini-extension.json content, returning {} when it is not an object."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


async def read_text(path: Path) -> str:
    async with aiofiles.open(path, encoding="utf-8") as handle:
        return await handle.read()


async def read_skill_description(skill_dir: Path) -> str:
    """Return the description declared by a skill, or "" if none is readable.

    SKILL.md front matter wins over the Gemini extension manifest.
    """
    skill_file = skill_dir / CLAUDE_MARKER
    if await aiofiles.os.path.isfile(skill_file):
        try:
            frontmatter, _ = split_frontmatter(await read_text(skill_file))
        except (OSError, UnicodeDecodeError):
            frontmatter = {}
        description = str(frontmatter.get("description", "")).strip()
        if description:
            return description

    manifest_file = skill_dir / GEMINI_MARKER
    if await aiofiles.os.path.isfile(manifest_file):
        try:
            manifest = parse_extension_manifest(await read_text(manifest_file))
        except (OSError, UnicodeDecodeError):
            manifest = {}
        return str(manifest.get("description", "")).strip()

    return ""
