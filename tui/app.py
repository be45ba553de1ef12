"""Main TUI application for skill-porter."""

from textual.app import App
from textual.screen import ModalScreen

from config import AppConfig
from dashboard import ControlLoop, DashboardController, Intent, SessionState
from utils import get_logger

from .screens import DashboardScreen, SetupScreen

logger = get_logger(__name__)

_SCREEN_NAMES = {
    SessionState.CONFIGURING: "setup",
    SessionState.BROWSING: "dashboard",
}


class SkillPorterTUI(App):
    """Skill porter dashboard application."""

    TITLE = "skill-porter"

    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        ("ctrl+c", "quit", "Exit"),
    ]

    def __init__(self, config: AppConfig, **kwargs) -> None:
        """Initialize the TUI application.

        Args:
            config: Session settings used to prefill the setup screen
        """
        super().__init__(**kwargs)
        self.controller = DashboardController(config)
        self.control_loop = ControlLoop(self.controller, on_change=self._on_state_changed)

    def on_mount(self) -> None:
        self.install_screen(SetupScreen(self.controller, self.control_loop), name="setup")
        self.install_screen(DashboardScreen(self.controller, self.control_loop), name="dashboard")
        self.push_screen("setup")
        self.run_worker(self.control_loop.run(), name="control-loop", exclusive=True)

    def _on_state_changed(self) -> None:
        """Redraw after the control loop applied a message."""
        if self.controller.quit_requested:
            self.exit()
            return

        dashboard = self.get_screen("dashboard")
        if isinstance(dashboard, DashboardScreen):
            dashboard.refresh_view()

        # Leave an open help modal in place until it is dismissed.
        if isinstance(self.screen, ModalScreen):
            return

        wanted = _SCREEN_NAMES[self.controller.state]
        if self.screen is not self.get_screen(wanted):
            logger.debug(f"Switching to {wanted} screen")
            self.switch_screen(wanted)

    def action_quit(self) -> None:
        """Ask the control loop to quit."""
        self.control_loop.send(Intent.QUIT)


async def run_tui_mode(config: AppConfig) -> int:
    """Run the TUI mode.

    Args:
        config: Session settings

    Returns:
        Number of conversions reported failed during the session
    """
    app = SkillPorterTUI(config)
    try:
        await app.run_async()
    finally:
        await app.control_loop.shutdown()
    return app.controller.fail_count
