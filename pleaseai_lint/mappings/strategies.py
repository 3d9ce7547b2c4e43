"""Option-aware rule descriptions.

Each strategy is a pure function of the rule options list. Strategies
fall back to the mapping's static description when the first option has
an unrecognized shape.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from pleaseai_lint.mappings.models import DescriptionStrategy

DescriptionFn = Callable[[Sequence[Any], str], str]


def _first(options: Sequence[Any]) -> Any:
    return options[0] if options else None


def _first_dict(options: Sequence[Any]) -> dict[str, Any]:
    first = _first(options)
    return first if isinstance(first, dict) else {}


def quote_style(options: Sequence[Any], default: str) -> str:
    style = _first(options)
    if style == "single":
        return "Use single quotes for strings"
    if style == "double":
        return "Use double quotes for strings"
    if style == "backtick":
        return "Use template literals for strings"
    return default


def semicolon_style(options: Sequence[Any], default: str) -> str:
    style = _first(options)
    if style == "always":
        return "Always use semicolons at the end of statements"
    if style == "never":
        return "Never use semicolons (ASI)"
    return default


def indent_style(options: Sequence[Any], default: str) -> str:
    indent = _first(options)
    if indent == "tab":
        return "Use tabs for indentation"
    if isinstance(indent, int) and not isinstance(indent, bool):
        return f"Use {indent} spaces for indentation"
    return default


def const_destructuring(options: Sequence[Any], default: str) -> str:
    if _first_dict(options).get("destructuring") == "all":
        return "Use const for destructured variables only when all are never reassigned"
    return default


def explicit_any_rest_args(options: Sequence[Any], default: str) -> str:
    if _first_dict(options).get("ignoreRestArgs"):
        return "Avoid any type (rest arguments are allowed)"
    return default


def unused_vars_ignore_pattern(options: Sequence[Any], default: str) -> str:
    pattern = _first_dict(options).get("argsIgnorePattern")
    if pattern:
        return f"Remove unused variables (pattern {pattern} ignored)"
    return default


def type_definition_style(options: Sequence[Any], default: str) -> str:
    style = _first(options)
    if style == "interface":
        return "Prefer interface over type for object types"
    if style == "type":
        return "Prefer type over interface for object types"
    return default


DESCRIPTION_STRATEGIES: dict[DescriptionStrategy, DescriptionFn] = {
    DescriptionStrategy.QUOTE_STYLE: quote_style,
    DescriptionStrategy.SEMICOLON_STYLE: semicolon_style,
    DescriptionStrategy.INDENT_STYLE: indent_style,
    DescriptionStrategy.CONST_DESTRUCTURING: const_destructuring,
    DescriptionStrategy.EXPLICIT_ANY_REST_ARGS: explicit_any_rest_args,
    DescriptionStrategy.UNUSED_VARS_IGNORE_PATTERN: unused_vars_ignore_pattern,
    DescriptionStrategy.TYPE_DEFINITION_STYLE: type_definition_style,
}


def describe_with_options(
    strategy: DescriptionStrategy, options: Sequence[Any], default: str
) -> str:
    return DESCRIPTION_STRATEGIES[strategy](options, default)
