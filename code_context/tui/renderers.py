from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from code_context.lint.models import LintResolution
from code_context.tui.enums import UIStyle
from code_context.tui.tables import LintTable
from code_context.utils import compact_home_path


def _panel(title: str, body, style: str, subtitle: Optional[str] = None) -> Panel:
    return Panel(body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1))


class ContextConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_lint_rules(self, resolution: LintResolution, workspace: str) -> None:
        self.console.print(
            _panel(
                "lint overview",
                LintTable.summary_block(resolution, compact_home_path(workspace)),
                style=UIStyle.BLUE.value,
            )
        )
        self.console.print(
            _panel(
                "eslint rules",
                LintTable.rules_table(resolution),
                style=UIStyle.CYAN.value,
                subtitle=resolution.source,
            )
        )

    def render_no_lint_rules(self, workspace: str) -> None:
        self.console.print(
            _panel(
                "lint overview",
                f"No ESLint rules found in {compact_home_path(workspace)}.",
                style=UIStyle.YELLOW.value,
            )
        )

    def render_document(self, title: str, text: str, empty_message: str) -> None:
        if not text.strip():
            self.console.print(_panel(title, empty_message, style=UIStyle.YELLOW.value))
            return
        # Text() keeps rule file content from being parsed as rich markup
        self.console.print(_panel(title, Text(text.strip()), style=UIStyle.MAGENTA.value))
