"""Normalize `eslint --print-config` output into active rules."""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping, Optional

from pleaseai_lint.models import NormalizedConfig, NormalizedRule, RuleSeverity

_SCOPED_RULE_RE = re.compile(r"^(@[\w-]+)/(.+)$", re.DOTALL)

_SEVERITY_MAP: dict[Any, RuleSeverity] = {
    0: RuleSeverity.OFF,
    "off": RuleSeverity.OFF,
    1: RuleSeverity.WARN,
    "warn": RuleSeverity.WARN,
    2: RuleSeverity.ERROR,
    "error": RuleSeverity.ERROR,
}

PLUGIN_DISPLAY_NAMES: dict[str, str] = {
    "@typescript-eslint": "TypeScript",
    "react": "React",
    "react-hooks": "React Hooks",
    "jsx-a11y": "Accessibility",
    "import": "Imports",
    "import-x": "Imports",
    "unicorn": "Unicorn",
    "sonarjs": "SonarJS",
    "security": "Security",
    "n": "Node.js",
    "promise": "Promises",
    "jest": "Jest",
    "vitest": "Vitest",
    "testing-library": "Testing Library",
    "prettier": "Prettier",
    "vue": "Vue",
    "svelte": "Svelte",
    "astro": "Astro",
}


def parse_rule_id(rule_id: str) -> tuple[Optional[str], str]:
    """Return (plugin_prefix, rule_name) for a rule identifier.

    ``@scope/name`` and ``plugin/name`` yield their prefix; core rules
    such as ``no-console`` have no prefix.
    """
    match = _SCOPED_RULE_RE.match(rule_id)
    if match:
        return match.group(1), match.group(2)

    prefix, sep, name = rule_id.partition("/")
    if sep and prefix and name:
        return prefix, name
    return None, rule_id


def normalize_severity(value: Any) -> RuleSeverity:
    # bool is an int subclass; True must not read as "warn"
    if isinstance(value, bool):
        return RuleSeverity.OFF
    try:
        return _SEVERITY_MAP.get(value, RuleSeverity.OFF)
    except TypeError:
        return RuleSeverity.OFF


def parse_rule_config(rule_id: str, raw: Any) -> NormalizedRule:
    plugin_prefix, rule_name = parse_rule_id(rule_id)

    options: tuple[Any, ...] = ()
    if isinstance(raw, (list, tuple)):
        severity = normalize_severity(raw[0]) if raw else RuleSeverity.OFF
        options = tuple(raw[1:])
    else:
        severity = normalize_severity(raw)

    return NormalizedRule(
        rule_id=rule_id,
        plugin_prefix=plugin_prefix,
        rule_name=rule_name,
        severity=severity,
        options=options,
    )


def parse_eslint_config(
    rules: Mapping[str, Any], plugins: Iterable[str] | None = None
) -> NormalizedConfig:
    active: list[NormalizedRule] = []
    total = 0

    for rule_id, raw in rules.items():
        total += 1
        parsed = parse_rule_config(rule_id, raw)
        if parsed.severity != RuleSeverity.OFF:
            active.append(parsed)

    detected = {rule.plugin_prefix for rule in active if rule.plugin_prefix}
    detected.update(str(plugin) for plugin in plugins or ())

    return NormalizedConfig(
        rules=tuple(active),
        plugins=tuple(sorted(detected)),
        total_rule_count=total,
    )


def parse_print_config(payload: Mapping[str, Any]) -> NormalizedConfig:
    return parse_eslint_config(payload.get("rules", {}), payload.get("plugins"))
