"""Catalog of supported AI coding assistants and their rule files."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


class AgentName(str, Enum):
    VSCODE_COPILOT = "vscode-copilot"
    CURSOR = "cursor"
    WINDSURF = "windsurf"
    ZED = "zed"
    CLAUDE = "claude"
    CODEX = "codex"
    KIRO = "kiro"
    CLINE = "cline"
    AMP = "amp"
    AIDER = "aider"
    FIREBASE_STUDIO = "firebase-studio"
    OPEN_HANDS = "open-hands"
    GEMINI_CLI = "gemini-cli"
    JUNIE = "junie"
    AUGMENTCODE = "augmentcode"
    KILO_CODE = "kilo-code"
    GOOSE = "goose"
    ROO_CODE = "roo-code"
    WARP = "warp"


class HeaderStrategy(str, Enum):
    NONE = "none"
    STATIC = "static"
    FILE_PATTERNS = "file_patterns"


@dataclass(frozen=True)
class AgentDescriptor:
    name: AgentName
    label: str
    path: str
    append_mode: bool = False
    header_strategy: HeaderStrategy = HeaderStrategy.NONE
    header: Optional[str] = None
    default_patterns: tuple[str, ...] = ()


COPILOT_HEADER = '---\napplyTo: "**/*.{ts,tsx,js,jsx}"\n---'

CURSOR_HEADER = (
    "---\n"
    "description: ESLint Rules - Code Quality Standards\n"
    'globs: "**/*.{ts,tsx,js,jsx,json,jsonc,html,vue,svelte,astro,css,yaml,yml,'
    'graphql,gql,md,mdx}"\n'
    "alwaysApply: false\n"
    "---"
)

CLAUDE_DEFAULT_PATTERNS = ("**/*.{ts,tsx,js,jsx,json,vue,svelte,astro}",)


AGENT_CATALOG: dict[AgentName, AgentDescriptor] = {
    AgentName.VSCODE_COPILOT: AgentDescriptor(
        name=AgentName.VSCODE_COPILOT,
        label="GitHub Copilot (VS Code)",
        path="./.github/copilot-instructions.md",
        append_mode=True,
        header_strategy=HeaderStrategy.STATIC,
        header=COPILOT_HEADER,
    ),
    AgentName.CURSOR: AgentDescriptor(
        name=AgentName.CURSOR,
        label="Cursor",
        path="./.cursor/rules/eslint-rules.mdc",
        header_strategy=HeaderStrategy.STATIC,
        header=CURSOR_HEADER,
    ),
    AgentName.WINDSURF: AgentDescriptor(
        name=AgentName.WINDSURF,
        label="Windsurf",
        path="./.windsurf/rules/eslint-rules.md",
    ),
    AgentName.ZED: AgentDescriptor(
        name=AgentName.ZED,
        label="Zed",
        path="./.rules",
        append_mode=True,
    ),
    AgentName.CLAUDE: AgentDescriptor(
        name=AgentName.CLAUDE,
        label="Claude Code",
        path="./.claude/rules/eslint-rules.md",
        header_strategy=HeaderStrategy.FILE_PATTERNS,
        default_patterns=CLAUDE_DEFAULT_PATTERNS,
    ),
    AgentName.CODEX: AgentDescriptor(
        name=AgentName.CODEX,
        label="OpenAI Codex",
        path="./AGENTS.md",
        append_mode=True,
    ),
    AgentName.KIRO: AgentDescriptor(
        name=AgentName.KIRO,
        label="Kiro",
        path="./.kiro/steering/eslint-rules.md",
    ),
    AgentName.CLINE: AgentDescriptor(
        name=AgentName.CLINE,
        label="Cline",
        path="./.clinerules",
        append_mode=True,
    ),
    AgentName.AMP: AgentDescriptor(
        name=AgentName.AMP,
        label="AMP",
        path="./AGENT.md",
        append_mode=True,
    ),
    AgentName.AIDER: AgentDescriptor(
        name=AgentName.AIDER,
        label="Aider",
        path="./eslint-rules.md",
    ),
    AgentName.FIREBASE_STUDIO: AgentDescriptor(
        name=AgentName.FIREBASE_STUDIO,
        label="Firebase Studio",
        path="./.idx/airules.md",
        append_mode=True,
    ),
    AgentName.OPEN_HANDS: AgentDescriptor(
        name=AgentName.OPEN_HANDS,
        label="OpenHands",
        path="./.openhands/microagents/repo.md",
        append_mode=True,
    ),
    AgentName.GEMINI_CLI: AgentDescriptor(
        name=AgentName.GEMINI_CLI,
        label="Gemini CLI",
        path="./GEMINI.md",
        append_mode=True,
    ),
    AgentName.JUNIE: AgentDescriptor(
        name=AgentName.JUNIE,
        label="Junie",
        path="./.junie/guidelines.md",
        append_mode=True,
    ),
    AgentName.AUGMENTCODE: AgentDescriptor(
        name=AgentName.AUGMENTCODE,
        label="Augment Code",
        path="./.augment/rules/eslint-rules.md",
    ),
    AgentName.KILO_CODE: AgentDescriptor(
        name=AgentName.KILO_CODE,
        label="Kilo Code",
        path="./.kilocode/rules/eslint-rules.md",
    ),
    AgentName.GOOSE: AgentDescriptor(
        name=AgentName.GOOSE,
        label="Goose",
        path="./.goosehints",
        append_mode=True,
    ),
    AgentName.ROO_CODE: AgentDescriptor(
        name=AgentName.ROO_CODE,
        label="Roo Code",
        path="./.roo/rules/eslint-rules.md",
        append_mode=True,
    ),
    AgentName.WARP: AgentDescriptor(
        name=AgentName.WARP,
        label="Warp",
        path="./WARP.md",
        append_mode=True,
    ),
}

DEFAULT_INTERACTIVE_AGENTS: tuple[AgentName, ...] = (
    AgentName.CURSOR,
    AgentName.CLAUDE,
    AgentName.VSCODE_COPILOT,
)


def agent_names() -> list[AgentName]:
    return list(AGENT_CATALOG)


def agent_descriptor(name: AgentName | str) -> AgentDescriptor:
    agent = name if isinstance(name, AgentName) else AgentName(name)
    return AGENT_CATALOG[agent]


def agent_label(name: AgentName | str) -> str:
    return agent_descriptor(name).label


def render_header(
    descriptor: AgentDescriptor, file_patterns: Sequence[str] = ()
) -> Optional[str]:
    if descriptor.header_strategy == HeaderStrategy.STATIC:
        return descriptor.header
    if descriptor.header_strategy == HeaderStrategy.FILE_PATTERNS:
        patterns = list(file_patterns) or list(descriptor.default_patterns)
        return f'---\npaths: "{", ".join(patterns)}"\n---'
    return None
