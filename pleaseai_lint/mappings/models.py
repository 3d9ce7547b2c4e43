"""Rule mapping data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pleaseai_lint.models import RuleCategory


class DescriptionStrategy(str, Enum):
    QUOTE_STYLE = "quote_style"
    SEMICOLON_STYLE = "semicolon_style"
    INDENT_STYLE = "indent_style"
    CONST_DESTRUCTURING = "const_destructuring"
    EXPLICIT_ANY_REST_ARGS = "explicit_any_rest_args"
    UNUSED_VARS_IGNORE_PATTERN = "unused_vars_ignore_pattern"
    TYPE_DEFINITION_STYLE = "type_definition_style"


@dataclass(frozen=True)
class RuleMapping:
    description: str
    category: RuleCategory
    do_this: Optional[str] = None
    dont_do_this: Optional[str] = None
    description_strategy: Optional[DescriptionStrategy] = None


@dataclass(frozen=True)
class ResolvedMapping:
    description: str
    category: RuleCategory
    is_fallback: bool
    do_this: Optional[str] = None
    dont_do_this: Optional[str] = None
