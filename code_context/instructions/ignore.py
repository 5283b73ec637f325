from pathlib import Path

from code_context.constants import IGNORE_FILENAME
from code_context.instructions.loader import read_text_or_empty


def load_ignore_instructions(cwd: Path, filename: str = IGNORE_FILENAME) -> str:
    """Describe the root-level ignore file to the assistant; empty when absent."""
    patterns = read_text_or_empty(Path(cwd) / filename)
    if not patterns:
        return ""
    return (
        f"# {filename}\n\n"
        f"(The following is provided by a root-level {filename} file where the user has "
        "specified files and directories that should not be accessed. Attempting to access "
        "matching files will result in an error.)\n\n"
        f"{patterns}"
    )
