"""Render guideline documents to markdown."""

from __future__ import annotations

from typing import Optional

from pleaseai_lint.constants import CHECK_COMMAND, FIX_COMMAND
from pleaseai_lint.guidelines.generator import GeneratorOptions, generate_guidelines
from pleaseai_lint.models import GuidelineDocument, NormalizedConfig
from pleaseai_lint.utils import date_of

CORE_PRINCIPLES = (
    "Write code that is **accessible, performant, type-safe, and maintainable**. "
    "Focus on clarity and explicit intent over brevity."
)


def render_markdown(document: GuidelineDocument, include_guidance: bool = True) -> str:
    total = document.total_rule_count
    lines: list[str] = [
        "# ESLint Code Standards",
        "",
        f"This project enforces **{total} ESLint rules** for code quality and consistency.",
        "",
        "## Quick Reference",
        "",
        f"- **Check for issues**: `{CHECK_COMMAND}`",
        f"- **Fix issues**: `{FIX_COMMAND}`",
        "",
        "## Core Principles",
        "",
        CORE_PRINCIPLES,
        "",
        "---",
        "",
    ]

    for category in document.categories:
        lines.append(f"### {category.display_name}")
        lines.append("")
        for item in category.guidelines:
            suffix = "" if item.is_strict else " (recommended)"
            lines.append(f"- {item.description}{suffix}")
            if include_guidance:
                if item.do_this:
                    lines.append(f"  - **Do**: {item.do_this}")
                if item.dont_do_this:
                    lines.append(f"  - **Don't**: {item.dont_do_this}")
        lines.append("")

    lines.append("---")
    lines.append("")
    lines.append(
        f"*Generated from ESLint configuration on {date_of(document.generated_at)}. "
        f"{total} rules enforced.*"
    )
    return "\n".join(lines)


def generate_rules_content(
    config: NormalizedConfig,
    options: Optional[GeneratorOptions] = None,
    generated_at: Optional[str] = None,
) -> str:
    opts = options or GeneratorOptions()
    document = generate_guidelines(config, opts, generated_at=generated_at)
    return render_markdown(document, include_guidance=opts.include_guidance)
