"""Tests for resolving config through ``eslint --print-config``."""

import subprocess
from pathlib import Path

import pytest

from pleaseai_lint.errors import (
    ConfigNotFoundError,
    ConfigResolutionError,
    TargetFileNotFoundError,
)
from pleaseai_lint.eslint.loader import (
    ESLintConfigLoader,
    find_target_file,
    has_eslint_config,
    load_eslint_config,
)


def test_has_eslint_config_detects_flat_config(tmp_path: Path) -> None:
    assert has_eslint_config(tmp_path) is False
    (tmp_path / "eslint.config.mjs").write_text("export default []", encoding="utf-8")
    assert has_eslint_config(tmp_path) is True


def test_legacy_eslintrc_is_not_a_flat_config(tmp_path: Path) -> None:
    (tmp_path / ".eslintrc.json").write_text("{}", encoding="utf-8")
    assert has_eslint_config(tmp_path) is False


def test_find_target_file_prefers_first_candidate(tmp_path: Path) -> None:
    (tmp_path / "src").mkdir()
    (tmp_path / "index.js").write_text("", encoding="utf-8")
    (tmp_path / "src" / "main.ts").write_text("", encoding="utf-8")
    assert find_target_file(tmp_path) == "src/main.ts"


def test_find_target_file_none(tmp_path: Path) -> None:
    assert find_target_file(tmp_path) is None


def test_load_runs_print_config(project_root: Path, fake_eslint) -> None:
    calls = fake_eslint({"rules": {"no-console": "error"}})
    payload = load_eslint_config(project_root)
    assert payload == {"rules": {"no-console": "error"}}
    assert calls == [["npx", "eslint", "--print-config", "src/index.ts"]]


def test_load_uses_explicit_target(project_root: Path, fake_eslint) -> None:
    calls = fake_eslint({"rules": {}})
    ESLintConfigLoader(project_root).load("lib/app.js")
    assert calls[0][-1] == "lib/app.js"


def test_load_without_config_fails(tmp_path: Path, fake_eslint) -> None:
    calls = fake_eslint()
    with pytest.raises(ConfigNotFoundError) as excinfo:
        load_eslint_config(tmp_path)
    assert "eslint.config.js" in str(excinfo.value)
    assert calls == []


def test_load_without_target_fails(tmp_path: Path, fake_eslint) -> None:
    (tmp_path / "eslint.config.js").write_text("", encoding="utf-8")
    fake_eslint()
    with pytest.raises(TargetFileNotFoundError) as excinfo:
        load_eslint_config(tmp_path)
    assert "--file" in str(excinfo.value)


def test_nonzero_exit_is_fatal_and_truncated(project_root: Path, fake_eslint) -> None:
    fake_eslint(stdout="", stderr="x" * 1000, returncode=2)
    with pytest.raises(ConfigResolutionError) as excinfo:
        load_eslint_config(project_root)
    assert excinfo.value.message == "ESLint --print-config failed"
    assert len(excinfo.value.detail) == 200


def test_nonzero_exit_falls_back_to_stdout(project_root: Path, fake_eslint) -> None:
    fake_eslint(stdout="Oops: plugin missing", returncode=1)
    with pytest.raises(ConfigResolutionError) as excinfo:
        load_eslint_config(project_root)
    assert "plugin missing" in str(excinfo.value)


def test_unparsable_output_is_fatal(project_root: Path, fake_eslint) -> None:
    fake_eslint(stdout="not json at all")
    with pytest.raises(ConfigResolutionError) as excinfo:
        load_eslint_config(project_root)
    assert "not json at all" in str(excinfo.value)


def test_output_without_rules_is_fatal(project_root: Path, fake_eslint) -> None:
    fake_eslint({"plugins": ["react"]})
    with pytest.raises(ConfigResolutionError) as excinfo:
        load_eslint_config(project_root)
    assert "rules" in str(excinfo.value)


def test_missing_binary_is_fatal(project_root: Path, fake_eslint) -> None:
    fake_eslint(raises=FileNotFoundError("npx"))
    with pytest.raises(ConfigResolutionError) as excinfo:
        load_eslint_config(project_root)
    assert "Failed to run ESLint" in str(excinfo.value)


def test_timeout_is_fatal(project_root: Path, fake_eslint) -> None:
    fake_eslint(raises=subprocess.TimeoutExpired(cmd="npx", timeout=30))
    with pytest.raises(ConfigResolutionError) as excinfo:
        load_eslint_config(project_root)
    assert "timed out" in str(excinfo.value)
