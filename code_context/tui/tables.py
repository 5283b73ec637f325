import json
from typing import Any

from rich.table import Column, Table
from rich.text import Text

from code_context.lint.models import LintResolution, RuleValue
from code_context.tui.enums import SEVERITY_STYLE, UIStyle

_NUMERIC_SEVERITY = {0: "off", 1: "warn", 2: "error"}


def severity_label(value: RuleValue) -> str:
    head: Any = value[0] if isinstance(value, list) and value else value
    if isinstance(head, bool):
        return str(head)
    if isinstance(head, int):
        return _NUMERIC_SEVERITY.get(head, str(head))
    return str(head)


def rule_options(value: RuleValue) -> str:
    if isinstance(value, list) and len(value) > 1:
        return json.dumps(value[1:], ensure_ascii=False)
    return ""


class LintTable:
    @staticmethod
    def summary_block(resolution: LintResolution, workspace: str):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Workspace", workspace)
        table.add_row("Source", resolution.source)
        table.add_row("Rules", str(len(resolution.rules)))
        return table

    @staticmethod
    def rules_table(resolution: LintResolution) -> Table:
        table = Table(
            Column("Rule", style="bold"),
            Column("Severity"),
            Column("Options", overflow="fold"),
            expand=True,
        )
        for name in sorted(resolution.rules):
            value = resolution.rules[name]
            label = severity_label(value)
            table.add_row(
                name,
                Text(label, style=SEVERITY_STYLE.get(label, UIStyle.WHITE.value)),
                rule_options(value),
            )
        return table
