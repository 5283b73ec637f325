from code_context.lint.formatter import format_lint_rules
from code_context.lint.models import LintResolution, RuleConfig, RuleValue, extract_rules
from code_context.lint.probes import EslintCliProbe, IEffectiveConfigProbe, StaticConfigProbe
from code_context.lint.resolver import ConfigSource, LintConfigResolver

__all__ = [
    "ConfigSource",
    "EslintCliProbe",
    "IEffectiveConfigProbe",
    "LintConfigResolver",
    "LintResolution",
    "RuleConfig",
    "RuleValue",
    "StaticConfigProbe",
    "extract_rules",
    "format_lint_rules",
]
