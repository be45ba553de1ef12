"""Top bar showing the scan root and the default conversion target."""

from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget


class SessionHeader(Widget):
    """One-line bar: branding, scan root and default target.

    Assigning any reactive attribute repaints the bar.
    """

    DEFAULT_CSS = """
    SessionHeader {
        dock: top;
        height: 1;
        padding: 0 1;
        background: $primary-background;
    }
    """

    scan_root: reactive[str] = reactive("")
    target: reactive[str] = reactive("Auto")
    recursive: reactive[bool] = reactive(True)

    def __init__(
        self,
        scan_root: str = "",
        target: str = "Auto",
        recursive: bool = True,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.set_reactive(SessionHeader.scan_root, scan_root)
        self.set_reactive(SessionHeader.target, target)
        self.set_reactive(SessionHeader.recursive, recursive)

    def render(self) -> Text:
        line = Text(no_wrap=True, overflow="ellipsis")
        line.append("◉ skill-porter", style="bold color(42)")
        line.append(" │ ", style="dim")
        line.append(self.scan_root)
        if not self.recursive:
            line.append(" (top level only)", style="dim")

        target = f"default target: {self.target}"
        gap = self.content_size.width - line.cell_len - len(target)
        line.append(" " * max(gap, 1))
        line.append(target, style="color(75)")
        return line

    def update_session(self, scan_root: str, target: str, recursive: bool) -> None:
        self.scan_root = scan_root
        self.target = target
        self.recursive = recursive
