"""Interactive Textual-based selector for target agents."""

from __future__ import annotations

from typing import Iterable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, SelectionList, Static
from textual.widgets.selection_list import Selection

from pleaseai_lint.agents.registry import (
    AGENT_CATALOG,
    DEFAULT_INTERACTIVE_AGENTS,
    AgentName,
)


class AgentSelectorApp(App[list[str]]):
    """Pick the AI tools to generate rules for."""

    TITLE = "Select AI tools"
    CSS = """
    Screen {
        layout: vertical;
    }
    #info {
        height: 3;
        content-align: center middle;
        background: $primary-darken-2;
        color: $text;
        padding: 0 1;
    }
    SelectionList {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("a", "select_all", "Select All"),
        Binding("n", "select_none", "Select None"),
        Binding("enter", "confirm", "Confirm"),
        Binding("q", "quit_app", "Quit"),
    ]

    def __init__(
        self, initial: Iterable[AgentName] = DEFAULT_INTERACTIVE_AGENTS
    ) -> None:
        super().__init__()
        self._initial = {agent.value for agent in initial}

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(
            f"Agents: {len(AGENT_CATALOG)} | "
            f"Use [a] select all, [n] select none, [enter] confirm",
            id="info",
        )
        selections: list[Selection[str]] = [
            Selection(
                f"{descriptor.label} ({descriptor.path})",
                name.value,
                name.value in self._initial,
            )
            for name, descriptor in AGENT_CATALOG.items()
        ]
        yield SelectionList[str](*selections)
        yield Footer()

    def action_select_all(self) -> None:
        self.query_one(SelectionList).select_all()

    def action_select_none(self) -> None:
        self.query_one(SelectionList).deselect_all()

    def action_confirm(self) -> None:
        selected = set(self.query_one(SelectionList).selected)
        # keep catalog order regardless of click order
        self.exit([name.value for name in AGENT_CATALOG if name.value in selected])

    def action_quit_app(self) -> None:
        self.exit(None)


def select_agents(initial: Iterable[AgentName] = DEFAULT_INTERACTIVE_AGENTS) -> list[AgentName] | None:
    """Run the selector; ``None`` means the user cancelled."""
    result = AgentSelectorApp(initial).run()
    if result is None:
        return None
    return [AgentName(value) for value in result]
