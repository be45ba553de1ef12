"""Rich console output for everything printed outside the TUI."""

from typing import TYPE_CHECKING, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from config import Config
from utils.theme import Theme

if TYPE_CHECKING:
    from skills.types import SkillDir, Summary

Theme.use(Config.TUI_THEME)

# Global console instance with theme support
console = Console(theme=Theme.rich_theme())


def print_error(message: str, title: str = "Error") -> None:
    """Print an error inside a red panel.

    Args:
        message: Error message
        title: Panel title (default: "Error")
    """
    color = Theme.palette().failure
    console.print(
        Panel(
            f"[{color}]{message}[/{color}]",
            title=f"[bold {color}]{title}[/bold {color}]",
            border_style=color,
            box=box.ROUNDED,
        )
    )


def print_warning(message: str) -> None:
    console.print(f"[status.running]! {message}[/status.running]")


def print_success(message: str) -> None:
    console.print(f"[status.success]✓ {message}[/status.success]")


def print_info(message: str) -> None:
    console.print(f"[accent]{message}[/accent]")


def print_log_location(log_file: str) -> None:
    console.print()
    console.print(f"[muted]Detailed logs: {log_file}[/muted]")


def print_summary(skills: Sequence["SkillDir"], summary: "Summary") -> None:
    """Print one row per skill with its final status, then the totals line.

    The details column shows the converter error for failed skills and the
    converter output otherwise.
    """
    palette = Theme.palette()
    table = Table(box=box.ROUNDED, border_style=palette.muted, header_style=palette.accent)
    table.add_column("Skill", style="bold")
    table.add_column("Platform")
    table.add_column("Status")
    table.add_column("Details", overflow="fold")

    for skill in skills:
        color = palette.for_status(skill.status)
        table.add_row(
            skill.name,
            skill.platform.value,
            f"[{color}]{skill.status.value}[/{color}]",
            skill.error_log.strip() or skill.output_path.strip(),
        )

    console.print(table)
    console.print(
        f"Total: {summary.total} | "
        f"[status.success]Success: {summary.success}[/status.success] | "
        f"[status.failed]Failed: {summary.failed}[/status.failed] | "
        f"Pending: {summary.pending}"
    )
