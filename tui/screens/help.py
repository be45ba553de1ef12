"""Help screen modal."""

from rich.table import Table
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static

HELP_SECTIONS = [
    (
        "Navigation",
        [
            ("↑ / k", "Move up"),
            ("↓ / j", "Move down"),
            ("Esc", "Back to setup"),
            ("q / Ctrl+C", "Quit"),
        ],
    ),
    (
        "Conversion",
        [
            ("c", "Convert selected (default target)"),
            ("g", "Force convert selected to Gemini"),
            ("a", "Force convert selected to Claude"),
            ("A", "Convert all pending"),
            ("r", "Rescan root"),
        ],
    ),
    (
        "Setup",
        [
            ("Tab / Shift+Tab", "Move between fields"),
            ("Enter", "Start scanning"),
        ],
    ),
]


def _key_table() -> Table:
    table = Table(box=None, show_header=False, padding=(0, 2, 0, 0), expand=True)
    table.add_column("key", style="bold yellow", width=16, no_wrap=True)
    table.add_column("action")
    for index, (title, rows) in enumerate(HELP_SECTIONS):
        if index:
            table.add_row("", "")
        table.add_row(Text(title, style="bold magenta"), "")
        for key, desc in rows:
            table.add_row(key, desc)
    return table


class HelpScreen(ModalScreen[None]):
    """Modal screen listing the dashboard key bindings."""

    BINDINGS = [
        ("escape", "dismiss", "Close"),
        ("f1", "dismiss", "Close"),
        ("q", "dismiss", "Close"),
    ]

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    HelpScreen > #help-box {
        width: 56;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: double $primary;
        padding: 1 2;
    }

    HelpScreen #help-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $primary;
        margin-bottom: 1;
    }

    HelpScreen #help-close {
        margin-top: 1;
        width: 100%;
    }
    """

    def compose(self) -> ComposeResult:
        with Vertical(id="help-box"):
            yield Static("◉ skill-porter keys", id="help-title")
            yield Static(_key_table(), id="help-keys")
            yield Button("Close (Esc)", id="help-close", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "help-close":
            self.dismiss()

    def action_dismiss(self) -> None:
        self.dismiss()
