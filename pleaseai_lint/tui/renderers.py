from typing import Optional

from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel

from pleaseai_lint.agents.registry import AgentDescriptor
from pleaseai_lint.models import CheckResult, GenerateReport, NormalizedConfig
from pleaseai_lint.tui.enums import UIStyle, outcome_style
from pleaseai_lint.tui.tables import AgentsTable, ConfigTable
from pleaseai_lint.utils import compact_home_path, compact_home_paths_in_text

PREVIEW_RULE = "=" * 50


def _panel(
    title: str,
    body: RenderableType,
    style: str = UIStyle.BLUE.value,
    subtitle: Optional[str] = None,
) -> Panel:
    return Panel(body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1))


class LintConsoleUI:
    def __init__(self, console: Console | None = None, quiet: bool = False) -> None:
        self.console = console or Console()
        self.quiet = quiet

    def render_intro(self, title: str) -> None:
        if self.quiet:
            return
        self.console.print(_panel("pleaseai-lint", title))

    def render_notice(self, message: str, style: str = UIStyle.DIM.value) -> None:
        if self.quiet:
            return
        self.console.print(_panel("info", message, style=style))

    def render_config_summary(self, config: NormalizedConfig) -> None:
        if self.quiet:
            return
        self.console.print(_panel("eslint config", ConfigTable.summary_block(config)))

    def render_generate_result(self, report: GenerateReport, root: str) -> None:
        if self.quiet:
            return
        if report.results:
            self.console.print(
                _panel(
                    "agent rules",
                    AgentsTable.results_table(report.results),
                    style=UIStyle.CYAN.value,
                    subtitle=compact_home_path(root),
                )
            )
        self.console.print(
            AgentsTable.stats_panel(
                written=len(report.succeeded), failed=len(report.failed)
            )
        )
        if report.failed:
            failure_text = "\n".join(
                [
                    f"- {item.agent}: {escape(compact_home_paths_in_text(item.error or ''))}"
                    for item in report.failed
                ]
            )
            self.console.print(_panel("failures", failure_text, style=UIStyle.RED.value))
        else:
            self.console.print(
                _panel(
                    "next",
                    "AI assistants will now follow your ESLint rules.\n"
                    "- pleaseai-lint generate  (after changing eslint.config.*)",
                    style=UIStyle.DIM.value,
                )
            )

    def render_preview(
        self, content: str, descriptor: Optional[AgentDescriptor] = None
    ) -> None:
        if descriptor is None:
            title = "Preview of generated rules"
        else:
            title = f"Preview for {descriptor.name.value} ({descriptor.path})"
        # rules text contains [brackets] and markdown; print it verbatim
        self.console.print(title, markup=False, highlight=False)
        self.console.print(PREVIEW_RULE, markup=False, highlight=False)
        self.console.print(content, markup=False, highlight=False, soft_wrap=True)

    def render_check(self, result: CheckResult) -> None:
        self.console.print(
            _panel(
                "eslint configuration status",
                ConfigTable.check_block(result),
                style=outcome_style(result.config_valid),
            )
        )
        if result.error:
            self.console.print(
                _panel(
                    "error",
                    escape(compact_home_paths_in_text(result.error)),
                    style=UIStyle.RED.value,
                )
            )
