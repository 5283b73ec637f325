from pathlib import Path
from typing import Optional, Sequence


def resolve_workspace_path(
    roots: Sequence[str | Path], default: Optional[str | Path] = None
) -> Path:
    """Use the first open workspace root, else ``default``, else the process cwd."""
    if roots:
        return Path(roots[0]).expanduser()
    if default:
        return Path(default).expanduser()
    return Path.cwd()
