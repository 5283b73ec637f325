from code_context.instructions.aggregator import InstructionAggregator, build_instructions
from code_context.instructions.ignore import load_ignore_instructions
from code_context.instructions.loader import RuleFileLoader, load_rule_files, mode_rule_filename
from code_context.instructions.models import (
    InstructionDocument,
    InstructionOptions,
    InstructionOrigin,
    RuleFileInstruction,
    RuleSource,
    RuleSourceKind,
)

__all__ = [
    "InstructionAggregator",
    "InstructionDocument",
    "InstructionOptions",
    "InstructionOrigin",
    "RuleFileInstruction",
    "RuleFileLoader",
    "RuleSource",
    "RuleSourceKind",
    "build_instructions",
    "load_ignore_instructions",
    "load_rule_files",
    "mode_rule_filename",
]
