import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from pleaseai_lint.agents.registry import AgentName, agent_descriptor
from pleaseai_lint.errors import ConfigNotFoundError, LintAppError
from pleaseai_lint.models import NormalizedConfig
from pleaseai_lint.services import CheckService, GenerateService, PreviewService
from pleaseai_lint.settings import ProjectSettings, load_settings
from pleaseai_lint.tui.enums import UIStyle
from pleaseai_lint.tui.renderers import LintConsoleUI
from pleaseai_lint.utils import is_ci


AGENT_VALUES = [agent.value for agent in AgentName]


def _file_option() -> Callable:
    return click.option(
        "--file",
        "-f",
        "target_file",
        default=None,
        help="Target file for ESLint --print-config.",
    )


def _agents_option() -> Callable:
    return click.option(
        "--agent",
        "-a",
        "agents",
        multiple=True,
        type=click.Choice(AGENT_VALUES, case_sensitive=False),
        help="AI tool to generate rules for (repeatable).",
    )


def _root(obj: Dict[str, Any]) -> Path:
    return obj.get("root") or Path.cwd()


def _settings(root: Path) -> ProjectSettings:
    try:
        return load_settings(root)
    except LintAppError as exc:
        raise click.ClickException(str(exc))


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_config(service: GenerateService, target_file: Optional[str]) -> NormalizedConfig:
    try:
        return service.load(target_file)
    except LintAppError as exc:
        raise click.ClickException(str(exc))


def _run_generate(
    ui: LintConsoleUI,
    service: GenerateService,
    agents: tuple[str, ...],
    target_file: Optional[str],
) -> None:
    config = _load_config(service, target_file)
    ui.render_config_summary(config)

    report = service.write(config, service.resolve_agents(agents))
    ui.render_generate_result(report, root=str(service.root))

    if report.failed:
        raise click.exceptions.Exit(1)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--root",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Project directory (defaults to the current directory).",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
@click.pass_context
def cli(ctx: click.Context, root: Optional[Path], verbose: bool) -> None:
    """Convert ESLint config to AI rules for coding assistants."""
    _configure_logging(verbose)
    ctx.obj = {"root": root.resolve() if root is not None else None}


@cli.command(help="Initialize and generate AI rules.")
@_file_option()
@_agents_option()
@click.option(
    "--quiet/--no-quiet",
    "-q",
    default=is_ci,
    help="Suppress interactive prompts (default in CI).",
)
@click.pass_obj
def init(
    obj: Dict[str, Any],
    target_file: Optional[str],
    agents: tuple[str, ...],
    quiet: bool,
) -> None:
    root = _root(obj)
    ui = LintConsoleUI(Console(), quiet=quiet)
    settings = _settings(root)
    service = GenerateService(root, settings=settings)

    ui.render_intro("Setting up ESLint to AI Rules converter")
    if not service.loader.has_config():
        raise click.ClickException(str(ConfigNotFoundError(root)))
    ui.render_notice("Found ESLint configuration", style=UIStyle.GREEN.value)

    if agents:
        selected = [AgentName(agent.lower()) for agent in agents]
    elif settings.agents is not None or quiet:
        selected = service.resolve_agents()
    else:
        from pleaseai_lint.tui.agent_selector import select_agents

        chosen = select_agents()
        if chosen is None:
            ui.render_notice("Setup cancelled", style=UIStyle.YELLOW.value)
            return
        selected = chosen

    if not selected:
        ui.render_notice("No agents selected. Exiting.", style=UIStyle.YELLOW.value)
        return

    ui.render_notice(f"Selected {len(selected)} AI tools")
    _run_generate(ui, service, tuple(agent.value for agent in selected), target_file)


@cli.command(help="Generate AI rules from ESLint configuration.")
@_file_option()
@_agents_option()
@click.option("--quiet", "-q", is_flag=True, help="Suppress console output.")
@click.pass_obj
def generate(
    obj: Dict[str, Any],
    target_file: Optional[str],
    agents: tuple[str, ...],
    quiet: bool,
) -> None:
    root = _root(obj)
    ui = LintConsoleUI(Console(), quiet=quiet)
    service = GenerateService(root, settings=_settings(root))

    ui.render_intro("Generating AI rules from ESLint configuration")
    _run_generate(ui, service, tuple(agent.lower() for agent in agents), target_file)


@cli.command(help="Preview generated rules without writing files.")
@_file_option()
@click.option(
    "--agent",
    "-a",
    "agent",
    default=None,
    type=click.Choice(AGENT_VALUES, case_sensitive=False),
    help="Preview the file written for a specific AI tool.",
)
@click.pass_obj
def preview(obj: Dict[str, Any], target_file: Optional[str], agent: Optional[str]) -> None:
    root = _root(obj)
    ui = LintConsoleUI(Console())
    service = PreviewService(root, settings=_settings(root))

    try:
        config = service.load(target_file)
    except LintAppError as exc:
        raise click.ClickException(str(exc))

    ui.render_config_summary(config)
    name = AgentName(agent.lower()) if agent else None
    content = service.render(config, name)
    ui.render_preview(content, agent_descriptor(name) if name else None)


@cli.command(help="Check ESLint configuration status.")
@_file_option()
@click.pass_obj
def check(obj: Dict[str, Any], target_file: Optional[str]) -> None:
    root = _root(obj)
    ui = LintConsoleUI(Console())
    result = CheckService(root, settings=_settings(root)).check(target_file)
    ui.render_check(result)

    if not result.config_valid:
        raise click.exceptions.Exit(1)


def main() -> int:
    try:
        # non-standalone click returns the code of an explicit Exit
        code = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
