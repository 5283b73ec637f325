import json

from code_context.lint.models import RuleConfig


def format_lint_rules(rules: RuleConfig | None) -> str:
    if not rules:
        return ""
    body = json.dumps(rules, indent=2, ensure_ascii=False)
    return (
        "=== ESLint Rules ===\n"
        "The following ESLint rules must be followed when writing code:\n"
        f"{body}\n"
        "======="
    )
