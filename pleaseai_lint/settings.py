"""Optional per-project settings (``.pleaseai-lint.yaml``)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml
from jsonschema import Draft202012Validator

from pleaseai_lint.agents.registry import AgentName
from pleaseai_lint.constants import SETTINGS_FILENAMES
from pleaseai_lint.errors import InvalidSettingsError
from pleaseai_lint.eslint.loader import format_schema_error
from pleaseai_lint.guidelines.generator import GeneratorOptions

SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "agents": {
            "type": "array",
            "items": {"enum": [agent.value for agent in AgentName]},
            "uniqueItems": True,
        },
        "file": {"type": "string", "minLength": 1},
        "file_patterns": {"type": "array", "items": {"type": "string"}},
        "include_guidance": {"type": "boolean"},
        "include_fallback": {"type": "boolean"},
    },
}

_VALIDATOR = Draft202012Validator(SETTINGS_SCHEMA)


@dataclass(frozen=True)
class ProjectSettings:
    agents: Optional[tuple[AgentName, ...]] = None
    file: Optional[str] = None
    file_patterns: tuple[str, ...] = ()
    include_guidance: bool = True
    include_fallback: bool = True
    source_path: Optional[Path] = None

    @property
    def generator_options(self) -> GeneratorOptions:
        return GeneratorOptions(
            include_guidance=self.include_guidance,
            include_fallback=self.include_fallback,
        )


def find_settings_file(root: Path) -> Optional[Path]:
    for name in SETTINGS_FILENAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def parse_settings(path: Path) -> ProjectSettings:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise InvalidSettingsError(path, f"invalid YAML: {exc}") from exc

    if raw is None:
        raw = {}
    error = next(iter(_VALIDATOR.iter_errors(raw)), None)
    if error is not None:
        raise InvalidSettingsError(path, format_schema_error(error))

    agents = raw.get("agents")
    return ProjectSettings(
        agents=tuple(AgentName(agent) for agent in agents) if agents is not None else None,
        file=raw.get("file"),
        file_patterns=tuple(raw.get("file_patterns", [])),
        include_guidance=bool(raw.get("include_guidance", True)),
        include_fallback=bool(raw.get("include_fallback", True)),
        source_path=path,
    )


def load_settings(root: Path) -> ProjectSettings:
    path = find_settings_file(root)
    if path is None:
        return ProjectSettings()
    return parse_settings(path)
