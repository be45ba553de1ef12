"""Widgets rendering the skill list, the selected skill and the totals."""

from typing import List, Optional

from rich.text import Text
from textual.widgets import Static

from skills.types import SkillDir, Summary
from utils.theme import Theme


def render_skill_rows(skills: List[SkillDir], cursor: int) -> Text:
    """Render one line per skill, marking the row under the cursor."""
    palette = Theme.palette()
    text = Text()
    for i, skill in enumerate(skills):
        selected = i == cursor
        pointer = ">" if selected else " "
        name_style = f"bold {palette.accent}" if selected else ""
        text.append(f"{pointer} ")
        text.append(skill.name, style=name_style)
        text.append(" [")
        text.append(skill.status.value, style=palette.for_status(skill.status))
        text.append("]\n")
    return text


class SkillList(Static):
    """Scrollable list of discovered skills with their status."""

    DEFAULT_CSS = """
    SkillList {
        width: 45%;
        height: 100%;
        border-right: solid $primary-darken-2;
        padding: 0 2 0 1;
    }
    """

    def show(
        self,
        skills: List[SkillDir],
        cursor: int,
        scanning: bool = False,
        scan_error: Optional[str] = None,
    ) -> None:
        if skills:
            self.update(render_skill_rows(skills, cursor))
            return

        if scanning:
            self.update("Scanning...")
            return

        message = Text("No skills found.\n")
        if scan_error:
            message.append(f"Scan failed: {scan_error}\n", style=Theme.palette().failure)
        message.append("Press 'r' to rescan or 'esc' to configure.", style="dim")
        self.update(message)


class DetailsPanel(Static):
    """Details of the skill under the cursor."""

    DEFAULT_CSS = """
    DetailsPanel {
        width: 1fr;
        height: 100%;
        padding: 0 2;
    }
    """

    def show(self, skill: Optional[SkillDir], output_dir_error: Optional[str] = None) -> None:
        palette = Theme.palette()
        text = Text()
        if output_dir_error:
            text.append(f"Output directory unavailable: {output_dir_error}\n\n", style=palette.running)

        if skill is None:
            self.update(text)
            return

        text.append(f"Name: {skill.name}\n")
        text.append(f"Path: {skill.path}\n")
        text.append(f"Platform: {skill.platform.value}\n")
        text.append(f"Target: {skill.target.value}\n")
        text.append("Status: ")
        text.append(skill.status.value, style=palette.for_status(skill.status))
        text.append("\n")
        if skill.description:
            text.append(f"\n{skill.description}\n", style="italic")

        if skill.output_path:
            text.append("\nOutput:\n", style="bold")
            text.append(skill.output_path)
        if skill.error_log:
            text.append("\nError:\n", style=f"bold {palette.failure}")
            text.append(skill.error_log)
        self.update(text)


class SummaryBar(Static):
    """One-line totals for the session."""

    DEFAULT_CSS = """
    SummaryBar {
        dock: bottom;
        height: 1;
        padding: 0 1;
        color: $text-muted;
        background: $surface-darken-1;
    }
    """

    def show(self, summary: Summary) -> None:
        self.update(
            f"Total: {summary.total} | Success: {summary.success} | "
            f"Failed: {summary.failed} | Pending: {summary.pending} | "
            f"Running: {summary.running}"
        )
