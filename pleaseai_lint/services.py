import logging
from pathlib import Path
from typing import Optional, Sequence

from pleaseai_lint.agents.registry import AgentName, agent_descriptor, agent_names, render_header
from pleaseai_lint.agents.writers import create_agent, with_header
from pleaseai_lint.errors import ConfigNotFoundError, LintAppError
from pleaseai_lint.eslint.loader import ESLintConfigLoader
from pleaseai_lint.eslint.parser import parse_print_config
from pleaseai_lint.guidelines.renderer import generate_rules_content
from pleaseai_lint.models import (
    AgentWriteResult,
    CheckResult,
    GenerateReport,
    NormalizedConfig,
)
from pleaseai_lint.settings import ProjectSettings
from pleaseai_lint.utils import now_iso

logger = logging.getLogger(__name__)


class ConfigService:
    def __init__(
        self,
        root: Path,
        settings: Optional[ProjectSettings] = None,
        loader: Optional[ESLintConfigLoader] = None,
    ) -> None:
        self.root = root
        self.settings = settings or ProjectSettings()
        self.loader = loader or ESLintConfigLoader(root)

    def load(self, target_file: Optional[str] = None) -> NormalizedConfig:
        payload = self.loader.load(target_file or self.settings.file)
        return parse_print_config(payload)


class GenerateService(ConfigService):
    def resolve_agents(
        self, agents: Optional[Sequence[AgentName | str]] = None
    ) -> list[AgentName]:
        if agents:
            return [AgentName(agent) for agent in agents]
        if self.settings.agents is not None:
            return list(self.settings.agents)
        return agent_names()

    def run(
        self,
        agents: Optional[Sequence[AgentName | str]] = None,
        target_file: Optional[str] = None,
    ) -> GenerateReport:
        config = self.load(target_file)
        return self.write(config, self.resolve_agents(agents))

    def write(
        self, config: NormalizedConfig, agents: Sequence[AgentName]
    ) -> GenerateReport:
        report = GenerateReport(config=config)
        generated_at = now_iso()

        for agent in agents:
            path = agent_descriptor(agent).path
            try:
                handle = create_agent(
                    agent,
                    config,
                    root=self.root,
                    generator_options=self.settings.generator_options,
                    file_patterns=self.settings.file_patterns,
                    generated_at=generated_at,
                )
                handle.update()
            except Exception as exc:
                logger.debug("writing %s failed", agent.value, exc_info=True)
                report.results.append(
                    AgentWriteResult(
                        agent=agent.value, path=path, success=False, error=str(exc)
                    )
                )
                continue
            report.results.append(
                AgentWriteResult(agent=agent.value, path=path, success=True)
            )

        return report


class PreviewService(ConfigService):
    def render(
        self,
        config: NormalizedConfig,
        agent: Optional[AgentName | str] = None,
    ) -> str:
        content = generate_rules_content(config, self.settings.generator_options)
        if agent is None:
            return content
        header = render_header(agent_descriptor(agent), self.settings.file_patterns)
        return with_header(header, content)


class CheckService(ConfigService):
    def check(self, target_file: Optional[str] = None) -> CheckResult:
        if not self.loader.has_config():
            return CheckResult(
                has_config=False,
                config_valid=False,
                error=str(ConfigNotFoundError(self.root)),
            )
        try:
            config = self.load(target_file)
        except LintAppError as exc:
            return CheckResult(has_config=True, config_valid=False, error=str(exc))

        return CheckResult(
            has_config=True,
            config_valid=True,
            total_rule_count=config.total_rule_count,
            active_rule_count=config.active_rule_count,
            plugins=config.plugins,
        )
