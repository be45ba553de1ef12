"""Orchestration engine: controller state machine, jobs and control loop."""

from .controller import DashboardController, SessionState
from .events import ConversionFailed, ConversionSucceeded, DiscoveryCompleted, Intent
from .jobs import CONVERSION_TIMEOUT, ConversionJob, DiscoveryJob
from .loop import ControlLoop

__all__ = [
    "CONVERSION_TIMEOUT",
    "ControlLoop",
    "ConversionFailed",
    "ConversionJob",
    "ConversionSucceeded",
    "DashboardController",
    "DiscoveryCompleted",
    "DiscoveryJob",
    "Intent",
    "SessionState",
]
