"""Build a structured guideline document from normalized rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pleaseai_lint.mappings.resolver import get_rule_mapping
from pleaseai_lint.models import (
    CATEGORY_DISPLAY_NAMES,
    CATEGORY_ORDER,
    CategoryGuidelines,
    GuidelineDocument,
    GuidelineItem,
    NormalizedConfig,
    RuleCategory,
    RuleSeverity,
)
from pleaseai_lint.utils import now_iso


@dataclass(frozen=True)
class GeneratorOptions:
    include_guidance: bool = True
    include_fallback: bool = True


def _sort_key(item: GuidelineItem) -> tuple[bool, str]:
    return (not item.is_strict, item.rule_id)


def generate_guidelines(
    config: NormalizedConfig,
    options: Optional[GeneratorOptions] = None,
    generated_at: Optional[str] = None,
) -> GuidelineDocument:
    opts = options or GeneratorOptions()
    grouped: dict[RuleCategory, list[GuidelineItem]] = {}
    unmapped = 0

    for rule in config.rules:
        mapping = get_rule_mapping(rule.rule_id, rule.plugin_prefix, rule.options)

        if mapping.is_fallback:
            unmapped += 1
            if not opts.include_fallback:
                continue

        item = GuidelineItem(
            rule_id=rule.rule_id,
            is_strict=rule.severity == RuleSeverity.ERROR,
            description=mapping.description,
            category=mapping.category,
            do_this=mapping.do_this if opts.include_guidance else None,
            dont_do_this=mapping.dont_do_this if opts.include_guidance else None,
        )
        grouped.setdefault(mapping.category, []).append(item)

    categories: list[CategoryGuidelines] = []
    for category in CATEGORY_ORDER:
        items = grouped.get(category)
        if not items:
            continue
        categories.append(
            CategoryGuidelines(
                category=category,
                display_name=CATEGORY_DISPLAY_NAMES[category],
                guidelines=tuple(sorted(items, key=_sort_key)),
            )
        )

    return GuidelineDocument(
        categories=tuple(categories),
        total_rule_count=config.active_rule_count,
        unmapped_rule_count=unmapped,
        generated_at=generated_at or now_iso(),
    )
