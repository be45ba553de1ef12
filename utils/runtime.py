"""Runtime directory management for skill-porter-tui.

All runtime data is stored under ~/.skill-porter/ directory:
- config: Configuration file (created by config.write_default_config on first run)
- logs/: Log files
"""

import os

RUNTIME_DIR = os.path.join(os.path.expanduser("~"), ".skill-porter")


def get_log_dir() -> str:
    """Get the log directory path.

    Returns:
        Path to ~/.skill-porter/logs/
    """
    return os.path.join(RUNTIME_DIR, "logs")


def ensure_runtime_dirs(create_logs: bool = True) -> None:
    """Ensure runtime directories exist.

    Args:
        create_logs: Whether to create the logs directory
    """
    os.makedirs(RUNTIME_DIR, exist_ok=True)

    if create_logs:
        os.makedirs(get_log_dir(), exist_ok=True)
