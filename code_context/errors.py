from pathlib import Path


class ContextAppError(Exception):
    """Base user-facing application error."""


class ContextFileError(ContextAppError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class RuleFileReadError(ContextFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Failed to read rule file ({detail})")


class InvalidSettingsError(ContextFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid settings ({detail})")


class LintProbeError(ContextAppError):
    """Effective-config probe could not produce a configuration."""
