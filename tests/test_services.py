from pathlib import Path

from pleaseai_lint.agents import AgentName
from pleaseai_lint.constants import MARKER_START
from pleaseai_lint.services import CheckService, GenerateService, PreviewService
from pleaseai_lint.settings import ProjectSettings


# --- GenerateService ---


def test_resolve_agents_precedence(project_root: Path) -> None:
    service = GenerateService(project_root)
    assert len(service.resolve_agents()) == 19
    assert service.resolve_agents(["codex"]) == [AgentName.CODEX]

    configured = GenerateService(
        project_root, settings=ProjectSettings(agents=(AgentName.ZED,))
    )
    assert configured.resolve_agents() == [AgentName.ZED]
    assert configured.resolve_agents(["kiro"]) == [AgentName.KIRO]


def test_run_writes_every_agent(project_root: Path, fake_eslint) -> None:
    fake_eslint()
    report = GenerateService(project_root).run()

    assert len(report.results) == 19
    assert report.failed == []
    assert report.config.active_rule_count == 7
    assert (project_root / "AGENTS.md").read_text(encoding="utf-8").startswith(MARKER_START)
    assert (project_root / ".cursor" / "rules" / "eslint-rules.mdc").is_file()


def test_run_uses_settings_target_file(project_root: Path, fake_eslint) -> None:
    calls = fake_eslint()
    service = GenerateService(project_root, settings=ProjectSettings(file="lib/x.js"))
    service.run([AgentName.AIDER])
    assert calls[0][-1] == "lib/x.js"

    service.run([AgentName.AIDER], target_file="app.ts")
    assert calls[1][-1] == "app.ts"


def test_one_failing_agent_does_not_stop_others(project_root: Path, sample_config) -> None:
    (project_root / "AGENTS.md").mkdir()
    service = GenerateService(project_root)
    report = service.write(sample_config, [AgentName.CODEX, AgentName.WINDSURF, AgentName.GEMINI_CLI])

    assert [result.agent for result in report.results] == ["codex", "windsurf", "gemini-cli"]
    (failure,) = report.failed
    assert failure.agent == "codex"
    assert failure.path == "./AGENTS.md"
    assert failure.error
    assert [result.agent for result in report.succeeded] == ["windsurf", "gemini-cli"]
    assert (project_root / "GEMINI.md").is_file()


def test_all_agents_share_generation_date(project_root: Path, sample_config) -> None:
    GenerateService(project_root).write(sample_config, [AgentName.WINDSURF, AgentName.KIRO])
    windsurf = (project_root / ".windsurf" / "rules" / "eslint-rules.md").read_text(encoding="utf-8")
    kiro = (project_root / ".kiro" / "steering" / "eslint-rules.md").read_text(encoding="utf-8")
    assert windsurf == kiro


def test_settings_options_reach_the_files(project_root: Path, sample_config) -> None:
    settings = ProjectSettings(include_guidance=False, file_patterns=("app/**",))
    GenerateService(project_root, settings=settings).write(sample_config, [AgentName.CLAUDE])
    text = (project_root / ".claude" / "rules" / "eslint-rules.md").read_text(encoding="utf-8")
    assert text.startswith('---\npaths: "app/**"\n---\n\n')
    assert "**Do**" not in text


def test_result_as_dict(project_root: Path, sample_config) -> None:
    report = GenerateService(project_root).write(sample_config, [AgentName.ZED])
    assert report.results[0].as_dict() == {
        "agent": "zed",
        "path": "./.rules",
        "success": True,
        "error": None,
    }


# --- PreviewService ---


def test_preview_without_agent_is_bare_content(project_root: Path, sample_config) -> None:
    content = PreviewService(project_root).render(sample_config)
    assert content.startswith("# ESLint Code Standards")
    assert not (project_root / "AGENTS.md").exists()


def test_preview_with_agent_adds_header(project_root: Path, sample_config) -> None:
    service = PreviewService(project_root)
    assert service.render(sample_config, AgentName.CURSOR).startswith("---\ndescription:")
    assert service.render(sample_config, "claude").startswith('---\npaths: "')
    assert service.render(sample_config, "codex").startswith("# ESLint Code Standards")


# --- CheckService ---


def test_check_reports_counts(project_root: Path, fake_eslint) -> None:
    fake_eslint()
    result = CheckService(project_root).check()
    assert result.has_config is True
    assert result.config_valid is True
    assert result.total_rule_count == 8
    assert result.active_rule_count == 7
    assert result.plugins == ("@typescript-eslint", "react", "unicorn")
    assert result.error is None


def test_check_without_config(tmp_path: Path, fake_eslint) -> None:
    calls = fake_eslint()
    result = CheckService(tmp_path).check()
    assert result.has_config is False
    assert result.config_valid is False
    assert "eslint.config.js" in result.error
    assert calls == []


def test_check_with_broken_config(project_root: Path, fake_eslint) -> None:
    fake_eslint(stdout="", stderr="Cannot find module 'foo'", returncode=2)
    result = CheckService(project_root).check()
    assert result.has_config is True
    assert result.config_valid is False
    assert "Cannot find module" in result.error
    assert result.as_dict()["plugins"] == []
