import sys
import json
import subprocess
from pathlib import Path
from typing import Any, Callable

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

from pleaseai_lint.eslint import loader as loader_module  # noqa: E402
from pleaseai_lint.eslint.parser import parse_eslint_config  # noqa: E402
from pleaseai_lint.models import NormalizedConfig  # noqa: E402


SAMPLE_PRINT_CONFIG: dict[str, Any] = {
    "rules": {
        "no-console": "error",
        "prefer-const": ["warn", {"destructuring": "all"}],
        "no-alert": "off",
        "quotes": [2, "single"],
        "eqeqeq": 2,
        "@typescript-eslint/no-explicit-any": "error",
        "react/jsx-key": 1,
        "unicorn/filename-case": "warn",
    },
    "plugins": ["@typescript-eslint", "react", "unicorn"],
}


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("CI", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def write_json():
    def _write(path: Path, payload: dict) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")

    return _write


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "eslint.config.js").write_text("export default [];\n", encoding="utf-8")
    (root / "src" / "index.ts").write_text("export {};\n", encoding="utf-8")
    return root


@pytest.fixture
def fake_eslint(monkeypatch) -> Callable[..., list[list[str]]]:
    """Replace the ``npx eslint --print-config`` call with canned output."""

    def _install(
        payload: Any = None,
        *,
        stdout: str | None = None,
        stderr: str = "",
        returncode: int = 0,
        raises: BaseException | None = None,
    ) -> list[list[str]]:
        calls: list[list[str]] = []
        text = stdout if stdout is not None else json.dumps(
            SAMPLE_PRINT_CONFIG if payload is None else payload
        )

        def _run(args, **kwargs):
            calls.append(list(args))
            if raises is not None:
                raise raises
            return subprocess.CompletedProcess(
                args=args, returncode=returncode, stdout=text, stderr=stderr
            )

        monkeypatch.setattr(loader_module.subprocess, "run", _run)
        return calls

    return _install


@pytest.fixture
def sample_config() -> NormalizedConfig:
    return parse_eslint_config(
        SAMPLE_PRINT_CONFIG["rules"], SAMPLE_PRINT_CONFIG["plugins"]
    )


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
