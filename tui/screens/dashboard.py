"""Dashboard screen: the skill list, details of the selection and totals."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer

from dashboard import ControlLoop, DashboardController, Intent

from ..widgets import DetailsPanel, SessionHeader, SkillList, SummaryBar
from .help import HelpScreen


class DashboardScreen(Screen):
    """Browse discovered skills and launch conversions.

    Every key maps to an Intent sent to the control loop; the screen itself
    never changes controller state and only redraws from it.
    """

    BINDINGS = [
        ("q", "intent('quit')", "Quit"),
        ("up,k", "intent('cursor_up')", "Up"),
        ("down,j", "intent('cursor_down')", "Down"),
        ("c", "intent('convert_selected')", "Convert"),
        ("g", "intent('convert_gemini')", "Gemini"),
        ("a", "intent('convert_claude')", "Claude"),
        ("A", "intent('convert_all')", "All pending"),
        ("r", "intent('rescan')", "Rescan"),
        ("escape", "intent('back')", "Setup"),
        ("f1,question_mark", "show_help", "Help"),
    ]

    DEFAULT_CSS = """
    DashboardScreen {
        layout: vertical;
    }

    DashboardScreen > #main {
        height: 1fr;
        padding: 1 0;
    }
    """

    def __init__(self, controller: DashboardController, control_loop: ControlLoop, **kwargs) -> None:
        super().__init__(**kwargs)
        self.controller = controller
        self.control_loop = control_loop

    def compose(self) -> ComposeResult:
        config = self.controller.config
        yield SessionHeader(
            scan_root=config.scan_root,
            target=config.default_target.value,
            recursive=config.recursive,
            id="header",
        )
        with Horizontal(id="main"):
            yield SkillList(id="skill-list")
            yield DetailsPanel(id="details")
        yield SummaryBar(id="summary")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_view()

    def on_screen_resume(self) -> None:
        self.refresh_view()

    def refresh_view(self) -> None:
        """Redraw every widget from the controller."""
        if not self.is_mounted:
            return

        controller = self.controller
        config = controller.config
        self.query_one("#header", SessionHeader).update_session(
            scan_root=config.scan_root,
            target=config.default_target.value,
            recursive=config.recursive,
        )
        self.query_one("#skill-list", SkillList).show(
            controller.skills,
            controller.cursor,
            scanning=controller.scanning,
            scan_error=controller.scan_error,
        )
        self.query_one("#details", DetailsPanel).show(
            controller.selected, output_dir_error=controller.output_dir_error
        )
        self.query_one("#summary", SummaryBar).show(controller.summary())

    def action_intent(self, name: str) -> None:
        self.control_loop.send(Intent(name))

    def action_show_help(self) -> None:
        self.app.push_screen(HelpScreen())
