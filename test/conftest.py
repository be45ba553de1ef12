"""Shared fixtures: a small skill tree and stand-in converter executables."""

import json
import stat
import textwrap
from pathlib import Path

import pytest


def _write_executable(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n" + textwrap.dedent(body).lstrip())
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def skill_tree(tmp_path: Path) -> Path:
    """Build a scan root with skills at depth one and two.

    Layout (recursive scan finds 4 skills, top-level scan finds 3):

        skills/
          both/                 SKILL.md + gemini-extension.json
          claude-skill/         SKILL.md
            inner/SKILL.md      never reported, skills do not nest
          gemini-skill/         gemini-extension.json
          nested/deep-skill/    SKILL.md
          notes/README.md       not a skill
    """
    root = tmp_path / "skills"

    claude = root / "claude-skill"
    claude.mkdir(parents=True)
    (claude / "SKILL.md").write_text(
        textwrap.dedent(
            """
            ---
            name: claude-skill
            description: Review pull requests.
            ---

            Review the diff.
            """
        ).strip()
    )
    (claude / "inner").mkdir()
    (claude / "inner" / "SKILL.md").write_text("inner")

    gemini = root / "gemini-skill"
    gemini.mkdir()
    (gemini / "gemini-extension.json").write_text(
        json.dumps({"name": "gemini-skill", "description": "Summarize logs."})
    )

    both = root / "both"
    both.mkdir()
    (both / "SKILL.md").write_text("# no front matter\n")
    (both / "gemini-extension.json").write_text(json.dumps({"description": "From manifest."}))

    deep = root / "nested" / "deep-skill"
    deep.mkdir(parents=True)
    (deep / "SKILL.md").write_text("---\ndescription: Deep.\n---\n")

    notes = root / "notes"
    notes.mkdir()
    (notes / "README.md").write_text("not a skill")

    return root


@pytest.fixture
def fake_converter(tmp_path: Path) -> Path:
    """Converter that succeeds and echoes its arguments."""
    return _write_executable(
        tmp_path / "bin" / "skill-porter",
        """
        echo "converted $*"
        """,
    )


@pytest.fixture
def failing_converter(tmp_path: Path) -> Path:
    """Converter that writes to stderr and exits non-zero."""
    return _write_executable(
        tmp_path / "bin" / "skill-porter-broken",
        """
        echo "unsupported skill layout" >&2
        exit 3
        """,
    )
