from pleaseai_lint.eslint.parser import parse_eslint_config
from pleaseai_lint.guidelines.generator import GeneratorOptions, generate_guidelines
from pleaseai_lint.guidelines.renderer import generate_rules_content, render_markdown


STAMP = "2025-01-15T10:30:00+00:00"


def test_minimal_document_exact_output() -> None:
    config = parse_eslint_config({"no-console": "error"})
    content = generate_rules_content(config, generated_at=STAMP)

    assert content == "\n".join(
        [
            "# ESLint Code Standards",
            "",
            "This project enforces **1 ESLint rules** for code quality and consistency.",
            "",
            "## Quick Reference",
            "",
            "- **Check for issues**: `npx eslint .`",
            "- **Fix issues**: `npx eslint . --fix`",
            "",
            "## Core Principles",
            "",
            "Write code that is **accessible, performant, type-safe, and maintainable**. "
            "Focus on clarity and explicit intent over brevity.",
            "",
            "---",
            "",
            "### Code Quality",
            "",
            "- Remove console statements from production code",
            "  - **Do**: Use a proper logging library or remove debug statements",
            "  - **Don't**: Leave console.log statements in production code",
            "",
            "---",
            "",
            "*Generated from ESLint configuration on 2025-01-15. 1 rules enforced.*",
        ]
    )


def test_headings_appear_in_category_order(sample_config) -> None:
    content = generate_rules_content(sample_config, generated_at=STAMP)
    headings = [line for line in content.splitlines() if line.startswith("### ")]
    assert headings == [
        "### Type Safety & Explicitness",
        "### Code Quality",
        "### React & JSX",
        "### Code Style",
        "### Other",
    ]


def test_recommended_suffix_only_on_warnings(sample_config) -> None:
    content = generate_rules_content(sample_config, generated_at=STAMP)
    assert "- Provide unique key props for elements in arrays (recommended)" in content
    assert "- Avoid using the any type\n" in content
    assert "- Use strict equality operators (=== and !==)\n" in content


def test_footer_and_total(sample_config) -> None:
    content = generate_rules_content(sample_config, generated_at=STAMP)
    assert "This project enforces **7 ESLint rules**" in content
    assert content.endswith(
        "*Generated from ESLint configuration on 2025-01-15. 7 rules enforced.*"
    )
    assert not content.endswith("\n")


def test_guidance_can_be_omitted(sample_config) -> None:
    content = generate_rules_content(
        sample_config, GeneratorOptions(include_guidance=False), generated_at=STAMP
    )
    assert "**Do**" not in content
    assert "**Don't**" not in content


def test_render_flag_hides_guidance_already_in_document(sample_config) -> None:
    document = generate_guidelines(sample_config, generated_at=STAMP)
    assert "**Do**" in render_markdown(document)
    assert "**Do**" not in render_markdown(document, include_guidance=False)


def test_no_rules_still_renders_frame() -> None:
    config = parse_eslint_config({})
    content = generate_rules_content(config, generated_at=STAMP)
    assert "###" not in content
    assert "**0 ESLint rules**" in content
    assert content.endswith("0 rules enforced.*")
