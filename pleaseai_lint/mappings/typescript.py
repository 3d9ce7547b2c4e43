"""typescript-eslint rule mappings."""

from pleaseai_lint.mappings.models import DescriptionStrategy, RuleMapping
from pleaseai_lint.models import RuleCategory

TYPESCRIPT_RULE_MAPPINGS: dict[str, RuleMapping] = {
    "@typescript-eslint/no-explicit-any": RuleMapping(
        description="Avoid using the any type",
        category=RuleCategory.TYPE_SAFETY,
        do_this="Use specific types, unknown, or generics instead of any",
        dont_do_this="Use any to bypass type checking",
        description_strategy=DescriptionStrategy.EXPLICIT_ANY_REST_ARGS,
    ),
    "@typescript-eslint/no-unused-vars": RuleMapping(
        description="Remove unused variables",
        category=RuleCategory.CODE_QUALITY,
        do_this="Remove or use all declared variables",
        dont_do_this="Leave unused variables in code",
        description_strategy=DescriptionStrategy.UNUSED_VARS_IGNORE_PATTERN,
    ),
    "@typescript-eslint/explicit-function-return-type": RuleMapping(
        description="Add explicit return types to functions",
        category=RuleCategory.TYPE_SAFETY,
        do_this="Add return type annotations: function foo(): string",
        dont_do_this="Rely on type inference for function return types",
    ),
    "@typescript-eslint/explicit-module-boundary-types": RuleMapping(
        description="Add explicit types to exported functions and classes",
        category=RuleCategory.TYPE_SAFETY,
        do_this="Type all exported function parameters and return values",
        dont_do_this="Export functions without explicit type annotations",
    ),
    "@typescript-eslint/no-non-null-assertion": RuleMapping(
        description="Avoid non-null assertions (!)",
        category=RuleCategory.TYPE_SAFETY,
        do_this="Use optional chaining (?.) or proper null checks",
        dont_do_this="Use ! to assert non-null without checking",
    ),
    "@typescript-eslint/prefer-nullish-coalescing": RuleMapping(
        description="Use nullish coalescing operator (??)",
        category=RuleCategory.TYPE_SAFETY,
        do_this="Use ?? for null/undefined checks: value ?? defaultValue",
        dont_do_this='Use || which also catches falsy values like 0 or ""',
    ),
    "@typescript-eslint/prefer-optional-chain": RuleMapping(
        description="Use optional chaining (?.)",
        category=RuleCategory.TYPE_SAFETY,
        do_this="Use optional chaining: obj?.prop?.nested",
        dont_do_this="Use verbose checks: obj && obj.prop && obj.prop.nested",
    ),
    "@typescript-eslint/strict-boolean-expressions": RuleMapping(
        description="Use explicit boolean expressions",
        category=RuleCategory.TYPE_SAFETY,
        do_this="Use explicit checks: if (value !== undefined)",
        dont_do_this="Use implicit truthiness: if (value)",
    ),
    "@typescript-eslint/no-floating-promises": RuleMapping(
        description="Handle all promises - don't let them float",
        category=RuleCategory.CODE_QUALITY,
        do_this="Await promises or use .then()/.catch() or void operator",
        dont_do_this="Call async functions without handling the promise",
    ),
    "@typescript-eslint/await-thenable": RuleMapping(
        description="Only await thenable values",
        category=RuleCategory.CODE_QUALITY,
        do_this="Only await promises or thenable objects",
        dont_do_this="Await non-promise values",
    ),
    "@typescript-eslint/no-misused-promises": RuleMapping(
        description="Use promises correctly",
        category=RuleCategory.CODE_QUALITY,
        do_this="Handle promises properly in conditionals and callbacks",
        dont_do_this="Use promises where a boolean or void is expected",
    ),
    "@typescript-eslint/consistent-type-imports": RuleMapping(
        description="Use type-only imports for types",
        category=RuleCategory.IMPORTS,
        do_this="Use import type { Foo } for type-only imports",
        dont_do_this="Import types with regular import syntax",
    ),
    "@typescript-eslint/consistent-type-definitions": RuleMapping(
        description="Use consistent type definition style",
        category=RuleCategory.STYLE,
        description_strategy=DescriptionStrategy.TYPE_DEFINITION_STYLE,
    ),
    "@typescript-eslint/naming-convention": RuleMapping(
        description="Follow naming conventions",
        category=RuleCategory.STYLE,
        do_this="Follow project naming conventions for variables, types, and interfaces",
        dont_do_this="Use inconsistent naming styles",
    ),
    "@typescript-eslint/no-inferrable-types": RuleMapping(
        description="Omit type annotations for trivially inferred types",
        category=RuleCategory.STYLE,
        do_this="Let TypeScript infer simple types: const x = 5",
        dont_do_this="Add redundant type annotations: const x: number = 5",
    ),
    "@typescript-eslint/ban-types": RuleMapping(
        description="Avoid problematic built-in types",
        category=RuleCategory.TYPE_SAFETY,
        do_this="Use Record<string, unknown> instead of {}",
        dont_do_this="Use {}, Object, Function as types",
    ),
    "@typescript-eslint/no-unsafe-assignment": RuleMapping(
        description="Avoid assigning any to typed variables",
        category=RuleCategory.TYPE_SAFETY,
        do_this="Ensure type safety when assigning values",
        dont_do_this="Assign any values to typed variables",
    ),
    "@typescript-eslint/no-unsafe-member-access": RuleMapping(
        description="Avoid accessing members of any typed values",
        category=RuleCategory.TYPE_SAFETY,
        do_this="Type values before accessing their properties",
        dont_do_this="Access properties on any typed values",
    ),
    "@typescript-eslint/no-unsafe-call": RuleMapping(
        description="Avoid calling any typed values as functions",
        category=RuleCategory.TYPE_SAFETY,
        do_this="Ensure proper typing before calling functions",
        dont_do_this="Call any typed values as functions",
    ),
    "@typescript-eslint/no-unsafe-return": RuleMapping(
        description="Avoid returning any from functions",
        category=RuleCategory.TYPE_SAFETY,
        do_this="Ensure return values have proper types",
        dont_do_this="Return any from typed functions",
    ),
}
