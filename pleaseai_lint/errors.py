from pathlib import Path

from pleaseai_lint.constants import ESLINT_CONFIG_FILES


class LintAppError(Exception):
    """Base user-facing application error."""


class ConfigNotFoundError(LintAppError):
    def __init__(self, cwd: Path) -> None:
        self.cwd = cwd
        expected = ", ".join(ESLINT_CONFIG_FILES)
        super().__init__(
            f"No ESLint flat config found in {cwd}. "
            f"Create one of: {expected}"
        )


class TargetFileNotFoundError(LintAppError):
    def __init__(self, cwd: Path) -> None:
        self.cwd = cwd
        super().__init__(
            "No target file found for --print-config. "
            "Pass a file with --file or create src/index.ts"
        )


class ConfigResolutionError(LintAppError):
    def __init__(self, message: str, detail: str = "") -> None:
        self.message = message
        self.detail = detail
        text = f"{message}: {detail}" if detail else message
        super().__init__(text)


class InvalidSettingsError(LintAppError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid settings file ({detail}): {path}")
