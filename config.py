"""Configuration management for skill-porter-tui."""

import argparse
import os
from dataclasses import dataclass
from typing import Optional

from skills.types import ConversionTarget

# Define path constants directly to avoid circular imports with utils
# (utils.terminal_ui imports Config, and utils.runtime is in the utils package)
_RUNTIME_DIR = os.path.join(os.path.expanduser("~"), ".skill-porter")
_CONFIG_FILE = os.path.join(_RUNTIME_DIR, "config")

# Default configuration template
_DEFAULT_CONFIG = """\
# skill-porter-tui Configuration

# Converter executable invoked for every conversion job
SKILL_PORTER_BIN=skill-porter

# Log level used when --debug is not given
LOG_LEVEL=INFO

# Console colour palette: dark or light
TUI_THEME=dark
"""

ROOT_ENV = "SKILL_PORTER_ROOT"
OUT_ENV = "SKILL_PORTER_OUT"
BIN_ENV = "SKILL_PORTER_BIN"


def _load_config(path: str) -> dict[str, str]:
    """Parse a KEY=VALUE config file, skipping comments and blank lines."""
    cfg: dict[str, str] = {}
    if not os.path.isfile(path):
        return cfg
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, _, value = line.partition("=")
            # Strip inline comments (# ...) from the value
            if "#" in value:
                value = value[: value.index("#")]
            cfg[key.strip()] = value.strip()
    return cfg


def write_default_config() -> None:
    """Ensure ~/.skill-porter/config exists, create with defaults if not."""
    if not os.path.exists(_CONFIG_FILE):
        os.makedirs(_RUNTIME_DIR, exist_ok=True)
        with open(_CONFIG_FILE, "w", encoding="utf-8") as f:
            f.write(_DEFAULT_CONFIG)


_cfg = _load_config(_CONFIG_FILE)


class Config:
    """File-backed defaults. Access config values directly via Config.XXX."""

    SKILL_PORTER_BIN = _cfg.get("SKILL_PORTER_BIN") or "skill-porter"

    # Logging Configuration
    # Note: --debug forces DEBUG regardless of this value
    LOG_LEVEL = _cfg.get("LOG_LEVEL", "INFO").upper()

    TUI_THEME = _cfg.get("TUI_THEME", "dark")  # "dark" or "light"


@dataclass
class AppConfig:
    """Settings for one dashboard session.

    Attributes:
        scan_root: Directory to scan for skills
        recursive: Whether to descend below the immediate children of scan_root
        default_target: Target used when neither the job nor the skill sets one
        out_base_dir: Base directory for converted output ("" converts in place)
        auto_convert: Convert every pending skill without the interactive UI
        debug: Enable debug logging
        converter: Converter executable
    """

    scan_root: str
    recursive: bool = True
    default_target: ConversionTarget = ConversionTarget.AUTO
    out_base_dir: str = ""
    auto_convert: bool = False
    debug: bool = False
    converter: str = Config.SKILL_PORTER_BIN


def parse_target(value: str) -> ConversionTarget:
    """Parse a target name case-insensitively.

    Raises:
        ValueError: If the name is not Gemini, Claude or Auto
    """
    for target in ConversionTarget:
        if target.value.lower() == value.strip().lower():
            return target
    raise ValueError(f"invalid target: {value}")


def _first(*values: Optional[str]) -> str:
    for value in values:
        if value:
            return value
    return ""


def load_config(args: argparse.Namespace) -> AppConfig:
    """Build an AppConfig from parsed CLI arguments.

    Flags win over environment variables, which win over defaults (current
    directory for the scan root, in-place output).

    Raises:
        ValueError: If the target is unknown, the scan root is not a directory,
            or the output directory cannot be created
    """
    default_target = parse_target(args.target or ConversionTarget.AUTO.value)

    scan_root = _first(args.root, os.environ.get(ROOT_ENV), os.getcwd())
    if not os.path.isdir(scan_root):
        raise ValueError(f"invalid scan root: {scan_root}")

    out_base_dir = _first(args.out, os.environ.get(OUT_ENV))
    if out_base_dir:
        try:
            os.makedirs(out_base_dir, exist_ok=True)
        except OSError as e:
            raise ValueError(f"could not create output directory: {e}") from e
        if not os.path.isdir(out_base_dir):
            raise ValueError(f"output path is not a directory: {out_base_dir}")
        out_base_dir = os.path.abspath(out_base_dir)

    converter = _first(args.converter, os.environ.get(BIN_ENV), Config.SKILL_PORTER_BIN)

    return AppConfig(
        scan_root=os.path.abspath(scan_root),
        recursive=args.recursive,
        default_target=default_target,
        out_base_dir=out_base_dir,
        auto_convert=args.auto,
        debug=args.debug,
        converter=converter,
    )
