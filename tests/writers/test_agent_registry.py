import pytest

from pleaseai_lint.agents import AGENT_CATALOG, AgentName, agent_descriptor, agent_names
from pleaseai_lint.agents.registry import (
    CLAUDE_DEFAULT_PATTERNS,
    COPILOT_HEADER,
    CURSOR_HEADER,
    HeaderStrategy,
    agent_label,
    render_header,
)


EXPECTED_PATHS = {
    "vscode-copilot": ("./.github/copilot-instructions.md", True),
    "cursor": ("./.cursor/rules/eslint-rules.mdc", False),
    "windsurf": ("./.windsurf/rules/eslint-rules.md", False),
    "zed": ("./.rules", True),
    "claude": ("./.claude/rules/eslint-rules.md", False),
    "codex": ("./AGENTS.md", True),
    "kiro": ("./.kiro/steering/eslint-rules.md", False),
    "cline": ("./.clinerules", True),
    "amp": ("./AGENT.md", True),
    "aider": ("./eslint-rules.md", False),
    "firebase-studio": ("./.idx/airules.md", True),
    "open-hands": ("./.openhands/microagents/repo.md", True),
    "gemini-cli": ("./GEMINI.md", True),
    "junie": ("./.junie/guidelines.md", True),
    "augmentcode": ("./.augment/rules/eslint-rules.md", False),
    "kilo-code": ("./.kilocode/rules/eslint-rules.md", False),
    "goose": ("./.goosehints", True),
    "roo-code": ("./.roo/rules/eslint-rules.md", True),
    "warp": ("./WARP.md", True),
}


def test_catalog_has_every_agent() -> None:
    assert len(AGENT_CATALOG) == 19
    assert [name.value for name in agent_names()] == list(EXPECTED_PATHS)


@pytest.mark.parametrize("name, expected", sorted(EXPECTED_PATHS.items()))
def test_paths_and_merge_modes(name: str, expected) -> None:
    descriptor = agent_descriptor(name)
    assert (descriptor.path, descriptor.append_mode) == expected
    assert descriptor.name == AgentName(name)


def test_paths_are_unique() -> None:
    paths = [descriptor.path for descriptor in AGENT_CATALOG.values()]
    assert len(set(paths)) == len(paths)


def test_unknown_agent_raises() -> None:
    with pytest.raises(ValueError):
        agent_descriptor("notepad")


def test_labels() -> None:
    assert agent_label(AgentName.CLAUDE) == "Claude Code"
    assert agent_label("vscode-copilot") == "GitHub Copilot (VS Code)"


def test_static_headers() -> None:
    assert render_header(agent_descriptor("vscode-copilot")) == COPILOT_HEADER
    assert render_header(agent_descriptor("cursor")) == CURSOR_HEADER
    assert CURSOR_HEADER.startswith("---\ndescription: ESLint Rules")
    assert "alwaysApply: false" in CURSOR_HEADER


def test_agents_without_header() -> None:
    headerless = [
        name
        for name, descriptor in AGENT_CATALOG.items()
        if descriptor.header_strategy == HeaderStrategy.NONE
    ]
    assert len(headerless) == 16
    for name in headerless:
        assert render_header(AGENT_CATALOG[name]) is None


def test_claude_header_uses_default_patterns() -> None:
    header = render_header(agent_descriptor("claude"))
    assert header == f'---\npaths: "{CLAUDE_DEFAULT_PATTERNS[0]}"\n---'


def test_claude_header_uses_configured_patterns() -> None:
    header = render_header(agent_descriptor("claude"), ["src/**/*.ts", "lib/**/*.js"])
    assert header == '---\npaths: "src/**/*.ts, lib/**/*.js"\n---'
