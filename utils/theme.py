"""Console palettes used for the headless summary and error panels."""

from dataclasses import dataclass
from typing import Dict

from rich.style import Style
from rich.theme import Theme as RichTheme

from skills.types import ConversionStatus


@dataclass(frozen=True)
class Palette:
    """Colours for one console theme."""

    accent: str
    success: str
    running: str
    failure: str
    pending: str
    muted: str

    def for_status(self, status: ConversionStatus) -> str:
        return {
            ConversionStatus.PENDING: self.pending,
            ConversionStatus.RUNNING: self.running,
            ConversionStatus.SUCCESS: self.success,
            ConversionStatus.FAILED: self.failure,
        }[status]


DARK_PALETTE = Palette(
    accent="#00D9FF",
    success="#10B981",
    running="#F59E0B",
    failure="#EF4444",
    pending="#8B949E",
    muted="#484F58",
)

LIGHT_PALETTE = Palette(
    accent="#0969DA",
    success="#1A7F37",
    running="#9A6700",
    failure="#CF222E",
    pending="#57606A",
    muted="#8C959F",
)


class Theme:
    """Holds the active palette. Selected once from Config.TUI_THEME."""

    _current: str = "dark"
    _palettes: Dict[str, Palette] = {
        "dark": DARK_PALETTE,
        "light": LIGHT_PALETTE,
    }

    @classmethod
    def palette(cls) -> Palette:
        return cls._palettes[cls._current]

    @classmethod
    def use(cls, name: str) -> None:
        """Switch the active palette.

        Raises:
            ValueError: If ``name`` is not a known palette
        """
        key = name.strip().lower()
        if key not in cls._palettes:
            raise ValueError(f"Unknown theme: {name}. Available: {sorted(cls._palettes)}")
        cls._current = key

    @classmethod
    def rich_theme(cls) -> RichTheme:
        colors = cls.palette()
        return RichTheme(
            {
                "accent": Style(color=colors.accent),
                "muted": Style(color=colors.muted),
                "status.pending": Style(color=colors.pending),
                "status.running": Style(color=colors.running),
                "status.success": Style(color=colors.success),
                "status.failed": Style(color=colors.failure),
            }
        )
