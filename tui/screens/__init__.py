"""Screens for the skill-porter TUI."""

from .dashboard import DashboardScreen
from .help import HelpScreen
from .setup import SetupScreen

__all__ = ["DashboardScreen", "HelpScreen", "SetupScreen"]
