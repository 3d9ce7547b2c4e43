from datetime import datetime
from pathlib import Path

import pytest

from pleaseai_lint.utils import (
    compact_home_path,
    compact_home_paths_in_text,
    date_of,
    is_ci,
    now_iso,
    truncate,
)


# --- timestamps ---


def test_now_iso_is_utc_seconds() -> None:
    stamp = now_iso()
    parsed = datetime.fromisoformat(stamp)
    assert parsed.utcoffset() is not None
    assert parsed.microsecond == 0


def test_date_of() -> None:
    assert date_of("2025-01-15T23:59:59+00:00") == "2025-01-15"
    assert date_of("2025-01-15") == "2025-01-15"


# --- is_ci ---


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), ("1", True), ("TRUE", True), ("false", False), ("0", False), ("", False)],
)
def test_is_ci(value: str, expected: bool) -> None:
    assert is_ci({"CI": value}) is expected


def test_is_ci_unset() -> None:
    assert is_ci({}) is False


def test_is_ci_reads_process_env(monkeypatch) -> None:
    monkeypatch.setenv("CI", "1")
    assert is_ci() is True


# --- truncate ---


def test_truncate() -> None:
    assert truncate("a" * 500) == "a" * 200
    assert truncate("short") == "short"
    assert truncate("abcdef", limit=3) == "abc"


# --- compact_home_path ---


def test_compact_home_path(tmp_path: Path) -> None:
    assert compact_home_path(tmp_path) == "~"
    assert compact_home_path(tmp_path / "project" / "AGENTS.md") == "~/project/AGENTS.md"
    assert compact_home_path("/elsewhere/file") == "/elsewhere/file"


def test_compact_home_paths_in_text(tmp_path: Path) -> None:
    text = f"[Errno 21] Is a directory: '{tmp_path}/project/AGENTS.md'"
    assert compact_home_paths_in_text(text) == "[Errno 21] Is a directory: '~/project/AGENTS.md'"
