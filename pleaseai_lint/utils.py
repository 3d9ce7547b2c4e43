import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping, Optional

from pleaseai_lint.constants import (
    CI_ENV_VAR,
    CI_TRUTHY_VALUES,
    DIAGNOSTIC_PREVIEW_CHARS,
)


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def date_of(timestamp: str) -> str:
    return datetime.fromisoformat(timestamp).date().isoformat()


def is_ci(environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get(CI_ENV_VAR, "").strip().lower() in CI_TRUTHY_VALUES


def truncate(text: str, limit: int = DIAGNOSTIC_PREVIEW_CHARS) -> str:
    return text[:limit]


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def compact_home_paths_in_text(text: str) -> str:
    home = str(Path.home())
    if text == home:
        return "~"
    return text.replace(f"{home}/", "~/")
