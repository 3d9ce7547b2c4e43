"""Resolve the effective ESLint config through ``eslint --print-config``."""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path
from typing import Any, Optional

from jsonschema import Draft202012Validator

from pleaseai_lint.constants import (
    ESLINT_COMMAND,
    ESLINT_CONFIG_FILES,
    PRINT_CONFIG_TIMEOUT_SECONDS,
    TARGET_FILE_CANDIDATES,
)
from pleaseai_lint.errors import (
    ConfigNotFoundError,
    ConfigResolutionError,
    TargetFileNotFoundError,
)
from pleaseai_lint.utils import truncate

logger = logging.getLogger(__name__)

PRINT_CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["rules"],
    "properties": {
        "rules": {"type": "object"},
        "plugins": {"type": "array", "items": {"type": "string"}},
    },
}

_VALIDATOR = Draft202012Validator(PRINT_CONFIG_SCHEMA)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def find_eslint_config(cwd: Path) -> Optional[Path]:
    for name in ESLINT_CONFIG_FILES:
        candidate = cwd / name
        if candidate.is_file():
            return candidate
    return None


def has_eslint_config(cwd: Path) -> bool:
    return find_eslint_config(cwd) is not None


def find_target_file(cwd: Path) -> Optional[str]:
    for candidate in TARGET_FILE_CANDIDATES:
        if (cwd / candidate).is_file():
            return candidate
    return None


def validate_print_config(payload: Any) -> None:
    error = next(iter(_VALIDATOR.iter_errors(payload)), None)
    if error is not None:
        raise ConfigResolutionError(
            "Unexpected ESLint --print-config output", format_schema_error(error)
        )


class ESLintConfigLoader:
    def __init__(
        self,
        cwd: Path,
        command: tuple[str, ...] = ESLINT_COMMAND,
        timeout: int = PRINT_CONFIG_TIMEOUT_SECONDS,
    ) -> None:
        self.cwd = cwd
        self.command = command
        self.timeout = timeout

    def has_config(self) -> bool:
        return has_eslint_config(self.cwd)

    def resolve_target(self, target_file: Optional[str] = None) -> str:
        target = target_file or find_target_file(self.cwd)
        if not target:
            raise TargetFileNotFoundError(self.cwd)
        return target

    def load(self, target_file: Optional[str] = None) -> dict[str, Any]:
        if not self.has_config():
            raise ConfigNotFoundError(self.cwd)

        target = self.resolve_target(target_file)
        args = [*self.command, "--print-config", target]
        logger.debug("running %s in %s", " ".join(args), self.cwd)

        try:
            completed = subprocess.run(
                args,
                cwd=str(self.cwd),
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise ConfigResolutionError(
                "Failed to run ESLint", f"timed out after {exc.timeout}s"
            ) from exc
        except OSError as exc:
            raise ConfigResolutionError("Failed to run ESLint", str(exc)) from exc

        if completed.returncode != 0:
            diagnostic = completed.stderr or completed.stdout or "Unknown error"
            raise ConfigResolutionError(
                "ESLint --print-config failed", truncate(diagnostic.strip())
            )

        try:
            payload = json.loads(completed.stdout)
        except ValueError as exc:
            raise ConfigResolutionError(
                "Failed to parse ESLint config output",
                f"raw output: {truncate(completed.stdout)}",
            ) from exc

        validate_print_config(payload)
        logger.debug("resolved %d rule entries", len(payload["rules"]))
        return payload


def load_eslint_config(cwd: Path, target_file: Optional[str] = None) -> dict[str, Any]:
    return ESLintConfigLoader(cwd).load(target_file)
