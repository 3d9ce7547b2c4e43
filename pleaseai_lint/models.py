from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class RuleSeverity(str, Enum):
    OFF = "off"
    WARN = "warn"
    ERROR = "error"


class RuleCategory(str, Enum):
    """Guideline categories, declared in rendering order."""

    TYPE_SAFETY = "type-safety"
    CODE_QUALITY = "code-quality"
    REACT = "react"
    SECURITY = "security"
    PERFORMANCE = "performance"
    STYLE = "style"
    IMPORTS = "imports"
    TESTING = "testing"
    OTHER = "other"


CATEGORY_ORDER: tuple[RuleCategory, ...] = tuple(RuleCategory)

CATEGORY_DISPLAY_NAMES: dict[RuleCategory, str] = {
    RuleCategory.TYPE_SAFETY: "Type Safety & Explicitness",
    RuleCategory.CODE_QUALITY: "Code Quality",
    RuleCategory.REACT: "React & JSX",
    RuleCategory.SECURITY: "Security",
    RuleCategory.PERFORMANCE: "Performance",
    RuleCategory.STYLE: "Code Style",
    RuleCategory.IMPORTS: "Imports & Exports",
    RuleCategory.TESTING: "Testing",
    RuleCategory.OTHER: "Other",
}


@dataclass(frozen=True)
class NormalizedRule:
    rule_id: str
    plugin_prefix: Optional[str]
    rule_name: str
    severity: RuleSeverity
    options: tuple[Any, ...] = ()


@dataclass(frozen=True)
class NormalizedConfig:
    rules: tuple[NormalizedRule, ...]
    plugins: tuple[str, ...]
    total_rule_count: int

    @property
    def active_rule_count(self) -> int:
        return len(self.rules)


@dataclass(frozen=True)
class GuidelineItem:
    rule_id: str
    is_strict: bool
    description: str
    category: RuleCategory
    do_this: Optional[str] = None
    dont_do_this: Optional[str] = None


@dataclass(frozen=True)
class CategoryGuidelines:
    category: RuleCategory
    display_name: str
    guidelines: tuple[GuidelineItem, ...]


@dataclass(frozen=True)
class GuidelineDocument:
    categories: tuple[CategoryGuidelines, ...]
    total_rule_count: int
    unmapped_rule_count: int
    generated_at: str


@dataclass(frozen=True)
class AgentWriteResult:
    agent: str
    path: str
    success: bool
    error: Optional[str] = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "agent": self.agent,
            "path": self.path,
            "success": self.success,
            "error": self.error,
        }


@dataclass
class GenerateReport:
    config: NormalizedConfig
    results: list[AgentWriteResult] = field(default_factory=list)

    @property
    def succeeded(self) -> list[AgentWriteResult]:
        return [result for result in self.results if result.success]

    @property
    def failed(self) -> list[AgentWriteResult]:
        return [result for result in self.results if not result.success]


@dataclass(frozen=True)
class CheckResult:
    has_config: bool
    config_valid: bool
    total_rule_count: int = 0
    active_rule_count: int = 0
    plugins: tuple[str, ...] = ()
    error: Optional[str] = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "has_config": self.has_config,
            "config_valid": self.config_valid,
            "total_rule_count": self.total_rule_count,
            "active_rule_count": self.active_rule_count,
            "plugins": list(self.plugins),
            "error": self.error,
        }
