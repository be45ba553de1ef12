"""Main entry point for skill-porter-tui."""

import argparse
import asyncio
import importlib.metadata
import sys

from config import AppConfig, Config, load_config, write_default_config
from dashboard import ControlLoop, DashboardController, Intent
from utils import get_log_file_path, get_logger, setup_logger, terminal_ui
from utils.runtime import ensure_runtime_dirs

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find agent skills and convert them between Claude and Gemini formats"
    )

    try:
        version = importlib.metadata.version("skill-porter-tui")
    except importlib.metadata.PackageNotFoundError:
        version = "dev"
    parser.add_argument(
        "--version", "-V", action="version", version=f"skill-porter-tui {version}"
    )

    parser.add_argument(
        "--root",
        type=str,
        help="Directory to scan for skills (env: SKILL_PORTER_ROOT, default: current directory)",
    )
    parser.add_argument(
        "--out",
        type=str,
        help="Base directory for converted skills (env: SKILL_PORTER_OUT, default: in place)",
    )
    parser.add_argument(
        "--target",
        type=str,
        default="Auto",
        help="Default conversion target: Gemini, Claude or Auto",
    )
    parser.add_argument(
        "--recursive",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Scan below the immediate children of the root",
    )
    parser.add_argument(
        "--auto",
        action="store_true",
        help="Convert every pending skill without the dashboard and print a summary",
    )
    parser.add_argument(
        "--debug",
        "-d",
        action="store_true",
        help="Enable debug logging to ~/.skill-porter/logs/",
    )
    parser.add_argument(
        "--converter",
        type=str,
        help="Converter executable (env: SKILL_PORTER_BIN, default: skill-porter)",
    )
    return parser


async def run_auto_mode(config: AppConfig) -> int:
    """Scan, convert every pending skill and print a summary.

    Returns:
        Number of failed conversions
    """
    controller = DashboardController(config)
    loop = ControlLoop(controller)

    try:
        with terminal_ui.console.status(f"Scanning {config.scan_root}..."):
            loop.send(Intent.SUBMIT)
            await loop.run_until_idle()

        if controller.scan_error:
            terminal_ui.print_error(controller.scan_error, title="Scan Error")
            return 1
        if controller.output_dir_error:
            terminal_ui.print_warning(f"Output directory unavailable: {controller.output_dir_error}")
        if not controller.skills:
            terminal_ui.print_info(f"No skills found under {config.scan_root}")
            return 0

        with terminal_ui.console.status(f"Converting {len(controller.skills)} skill(s)..."):
            loop.send(Intent.CONVERT_ALL)
            await loop.run_until_idle()
    finally:
        await loop.shutdown()

    terminal_ui.print_summary(controller.skills, controller.summary())
    if controller.fail_count == 0:
        terminal_ui.print_success(f"Converted {controller.success_count} skill(s)")
    return controller.fail_count


def main():
    """Main CLI entry point."""
    args = build_parser().parse_args()

    try:
        config = load_config(args)
    except ValueError as e:
        terminal_ui.print_error(str(e), title="Configuration Error")
        sys.exit(1)

    write_default_config()
    ensure_runtime_dirs()
    setup_logger(log_level="DEBUG" if config.debug else Config.LOG_LEVEL)
    logger.info(f"Starting skill-porter-tui (root={config.scan_root}, auto={config.auto_convert})")

    if config.auto_convert:
        failures = asyncio.run(run_auto_mode(config))
    else:
        from tui import run_tui_mode

        failures = asyncio.run(run_tui_mode(config))

    if config.debug:
        log_file = get_log_file_path()
        if log_file:
            terminal_ui.print_log_location(log_file)

    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
