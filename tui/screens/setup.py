"""Setup screen: scan root, output directory, recursion and default target."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Button, Checkbox, Input, Label, Static

from dashboard import ControlLoop, DashboardController, Intent


class SetupScreen(Screen):
    """Form for the session settings, shown until a scan is started."""

    DEFAULT_CSS = """
    SetupScreen {
        align: center middle;
    }

    SetupScreen > #setup-form {
        width: 64;
        height: auto;
        border: round $primary;
        padding: 1 2;
    }

    SetupScreen .setup-title {
        text-align: center;
        text-style: bold;
        color: $primary;
        margin-bottom: 1;
    }

    SetupScreen Label {
        margin-top: 1;
        color: $text-muted;
    }

    SetupScreen Button {
        width: 100%;
        margin-top: 1;
    }

    SetupScreen .setup-hint {
        margin-top: 1;
        color: $text-muted;
        text-align: center;
    }
    """

    def __init__(self, controller: DashboardController, control_loop: ControlLoop, **kwargs) -> None:
        super().__init__(**kwargs)
        self.controller = controller
        self.control_loop = control_loop

    def compose(self) -> ComposeResult:
        config = self.controller.config
        with Vertical(id="setup-form"):
            yield Static("Skill Porter Setup", classes="setup-title")
            yield Label("Scan Root")
            yield Input(
                value=config.scan_root,
                placeholder="Current Directory (.)",
                id="scan-root",
            )
            yield Label("Output Dir")
            yield Input(
                value=config.out_base_dir,
                placeholder="In-place (leave empty)",
                id="out-dir",
            )
            yield Checkbox("Recursive Scan", value=config.recursive, id="recursive")
            yield Button(self._target_label(), id="target")
            yield Button("Start Scanning", id="start", variant="primary")
            yield Static(
                "Tab to move • Enter to start • Ctrl+C to quit",
                classes="setup-hint",
            )

    def on_mount(self) -> None:
        self.query_one("#scan-root", Input).focus()

    def _target_label(self) -> str:
        return f"Default Target: {self.controller.config.default_target.value}"

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "target":
            self.controller.cycle_default_target()
            event.button.label = self._target_label()
        elif event.button.id == "start":
            self.start_scan()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.start_scan()

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        self.controller.set_recursive(event.value)

    def start_scan(self) -> None:
        """Store the form values and ask the controller to scan."""
        self.controller.set_paths(
            self.query_one("#scan-root", Input).value,
            self.query_one("#out-dir", Input).value,
        )
        self.control_loop.send(Intent.SUBMIT)
