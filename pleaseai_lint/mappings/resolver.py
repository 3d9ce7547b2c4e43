"""Resolve rules to curated mappings, synthesizing a fallback on miss."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence

from pleaseai_lint.eslint.parser import PLUGIN_DISPLAY_NAMES
from pleaseai_lint.mappings.core import CORE_RULE_MAPPINGS
from pleaseai_lint.mappings.models import ResolvedMapping, RuleMapping
from pleaseai_lint.mappings.react import REACT_RULE_MAPPINGS
from pleaseai_lint.mappings.strategies import describe_with_options
from pleaseai_lint.mappings.typescript import TYPESCRIPT_RULE_MAPPINGS
from pleaseai_lint.models import RuleCategory

RULE_MAPPINGS: Mapping[str, RuleMapping] = MappingProxyType(
    {
        **CORE_RULE_MAPPINGS,
        **TYPESCRIPT_RULE_MAPPINGS,
        **REACT_RULE_MAPPINGS,
    }
)

PLUGIN_CATEGORIES: dict[str, RuleCategory] = {
    "@typescript-eslint": RuleCategory.TYPE_SAFETY,
    "react": RuleCategory.REACT,
    "react-hooks": RuleCategory.REACT,
    "jsx-a11y": RuleCategory.REACT,
    "import": RuleCategory.IMPORTS,
    "import-x": RuleCategory.IMPORTS,
    "security": RuleCategory.SECURITY,
    "jest": RuleCategory.TESTING,
    "vitest": RuleCategory.TESTING,
    "testing-library": RuleCategory.TESTING,
    "promise": RuleCategory.CODE_QUALITY,
}

# Order matters: first match wins. Only the first alternative of each
# pattern is anchored.
RULE_ID_PATTERNS: tuple[tuple[re.Pattern[str], RuleCategory], ...] = (
    (
        re.compile(r"^no-async-promise-executor|require-await|no-await-in-loop"),
        RuleCategory.PERFORMANCE,
    ),
    (re.compile(r"^prefer-const|no-var|const-|let-"), RuleCategory.CODE_QUALITY),
    (re.compile(r"^no-unused-|no-undef"), RuleCategory.TYPE_SAFETY),
    (re.compile(r"^no-console|no-debugger|no-alert"), RuleCategory.CODE_QUALITY),
    (re.compile(r"^eqeqeq|no-implicit-coercion"), RuleCategory.TYPE_SAFETY),
    (re.compile(r"^camelcase|id-|naming-"), RuleCategory.STYLE),
    (re.compile(r"^indent|quotes|semi|comma|space|brace"), RuleCategory.STYLE),
    (re.compile(r"^no-eval|no-new-func|no-script-url"), RuleCategory.SECURITY),
    (re.compile(r"^complexity|max-|no-nested"), RuleCategory.CODE_QUALITY),
    (re.compile(r"import|export"), RuleCategory.IMPORTS),
    (re.compile(r"test|spec|describe|it\b"), RuleCategory.TESTING),
)

_NAME_PREFIXES: tuple[tuple[str, str], ...] = (
    ("no-", "Avoid"),
    ("prefer-", "Prefer"),
    ("require-", "Require"),
)


def infer_category(rule_id: str, plugin_prefix: Optional[str]) -> RuleCategory:
    if plugin_prefix and plugin_prefix in PLUGIN_CATEGORIES:
        return PLUGIN_CATEGORIES[plugin_prefix]

    for pattern, category in RULE_ID_PATTERNS:
        if pattern.search(rule_id):
            return category
    return RuleCategory.OTHER


def _humanize(kebab_case: str) -> str:
    return " ".join(kebab_case.split("-"))


def describe_rule_name(rule_name: str) -> str:
    for prefix, verb in _NAME_PREFIXES:
        if rule_name.startswith(prefix):
            return f"{verb} {_humanize(rule_name[len(prefix):])}"
    return f"Follow {_humanize(rule_name)} rule"


def generate_fallback_description(rule_id: str, plugin_prefix: Optional[str]) -> str:
    if not plugin_prefix:
        return describe_rule_name(rule_id)

    rule_name = rule_id.replace(f"{plugin_prefix}/", "", 1)
    plugin_name = PLUGIN_DISPLAY_NAMES.get(plugin_prefix, plugin_prefix)
    return f"{plugin_name}: {describe_rule_name(rule_name)}"


def get_rule_mapping(
    rule_id: str,
    plugin_prefix: Optional[str],
    options: Sequence[Any] = (),
) -> ResolvedMapping:
    mapping = RULE_MAPPINGS.get(rule_id)
    if mapping is None:
        return ResolvedMapping(
            description=generate_fallback_description(rule_id, plugin_prefix),
            category=infer_category(rule_id, plugin_prefix),
            is_fallback=True,
        )

    description = mapping.description
    if mapping.description_strategy is not None and options:
        description = describe_with_options(
            mapping.description_strategy, options, mapping.description
        )

    return ResolvedMapping(
        description=description,
        category=mapping.category,
        is_fallback=False,
        do_this=mapping.do_this,
        dont_do_this=mapping.dont_do_this,
    )
