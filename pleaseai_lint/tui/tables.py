from rich.markup import escape
from rich.panel import Panel
from rich.table import Column, Table

from pleaseai_lint.agents.registry import agent_label
from pleaseai_lint.models import AgentWriteResult, CheckResult, NormalizedConfig
from pleaseai_lint.tui.enums import WRITE_STATUS_STYLE, WriteStatus, outcome_style


def _plugins_text(plugins: tuple[str, ...]) -> str:
    return ", ".join(plugins) if plugins else "None"


def _styled(text: str, style: str) -> str:
    return f"[{style}]{text}[/{style}]"


class ConfigTable:
    @staticmethod
    def summary_block(config: NormalizedConfig) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Total rules", str(config.total_rule_count))
        table.add_row("Active rules", str(config.active_rule_count))
        table.add_row("Plugins", _plugins_text(config.plugins))
        return table

    @staticmethod
    def check_block(result: CheckResult) -> Table:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        found = "yes" if result.has_config else "no"
        table.add_row("Config found", _styled(found, outcome_style(result.has_config)))
        if result.config_valid:
            table.add_row("Total rules", str(result.total_rule_count))
            table.add_row("Active rules", str(result.active_rule_count))
            table.add_row("Plugins", _plugins_text(result.plugins))
        return table


class AgentsTable:
    @staticmethod
    def results_table(results: list[AgentWriteResult]) -> Table:
        table = Table(
            Column(header="Agent", width=26),
            Column(header="Status", width=8),
            Column(header="Path", overflow="ellipsis", max_width=48),
            Column(header="Detail", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for result in results:
            status = WriteStatus.WRITTEN if result.success else WriteStatus.FAILED
            table.add_row(
                agent_label(result.agent),
                _styled(status.value, WRITE_STATUS_STYLE[status]),
                result.path,
                escape(result.error or ""),
            )
        return table

    @staticmethod
    def stats_panel(written: int, failed: int) -> Panel:
        table = Table(show_header=False, box=None)
        table.add_row(f"[bold]{WriteStatus.WRITTEN.value}[/bold]", str(written))
        table.add_row(f"[bold]{WriteStatus.FAILED.value}[/bold]", str(failed))
        return Panel(table, title="generate", border_style=outcome_style(failed == 0))
