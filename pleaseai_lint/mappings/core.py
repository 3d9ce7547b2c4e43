"""Core ESLint rule mappings."""

from pleaseai_lint.mappings.models import DescriptionStrategy, RuleMapping
from pleaseai_lint.models import RuleCategory

CORE_RULE_MAPPINGS: dict[str, RuleMapping] = {
    # Code quality
    "no-console": RuleMapping(
        description="Remove console statements from production code",
        category=RuleCategory.CODE_QUALITY,
        do_this="Use a proper logging library or remove debug statements",
        dont_do_this="Leave console.log statements in production code",
    ),
    "no-debugger": RuleMapping(
        description="Remove debugger statements",
        category=RuleCategory.CODE_QUALITY,
        do_this="Remove debugger statements before committing",
        dont_do_this="Leave debugger statements in code",
    ),
    "no-alert": RuleMapping(
        description="Avoid using alert, confirm, and prompt",
        category=RuleCategory.CODE_QUALITY,
        do_this="Use proper UI components for user interactions",
        dont_do_this="Use alert(), confirm(), or prompt()",
    ),
    "no-unused-vars": RuleMapping(
        description="Remove unused variables",
        category=RuleCategory.CODE_QUALITY,
        do_this="Remove or use all declared variables",
        dont_do_this="Leave unused variables in code",
    ),
    "no-undef": RuleMapping(
        description="Avoid using undefined variables",
        category=RuleCategory.TYPE_SAFETY,
        do_this="Ensure all variables are properly declared before use",
        dont_do_this="Reference variables that are not defined",
    ),
    # Best practices
    "prefer-const": RuleMapping(
        description="Use const for variables that are never reassigned",
        category=RuleCategory.CODE_QUALITY,
        do_this="Use const by default for all variable declarations",
        dont_do_this="Use let when the variable is never reassigned",
        description_strategy=DescriptionStrategy.CONST_DESTRUCTURING,
    ),
    "no-var": RuleMapping(
        description="Use let or const instead of var",
        category=RuleCategory.CODE_QUALITY,
        do_this="Use const for constants, let for variables that change",
        dont_do_this="Use var for variable declarations",
    ),
    "eqeqeq": RuleMapping(
        description="Use strict equality operators (=== and !==)",
        category=RuleCategory.TYPE_SAFETY,
        do_this="Always use === and !== for comparisons",
        dont_do_this="Use == or != which perform type coercion",
    ),
    # Style
    "quotes": RuleMapping(
        description="Use consistent quote style for strings",
        category=RuleCategory.STYLE,
        description_strategy=DescriptionStrategy.QUOTE_STYLE,
    ),
    "semi": RuleMapping(
        description="Use consistent semicolon style",
        category=RuleCategory.STYLE,
        description_strategy=DescriptionStrategy.SEMICOLON_STYLE,
    ),
    "indent": RuleMapping(
        description="Use consistent indentation",
        category=RuleCategory.STYLE,
        description_strategy=DescriptionStrategy.INDENT_STYLE,
    ),
    # Modern JavaScript
    "prefer-template": RuleMapping(
        description="Use template literals instead of string concatenation",
        category=RuleCategory.STYLE,
        do_this="Use template literals: `Hello ${name}`",
        dont_do_this='Use string concatenation: "Hello " + name',
    ),
    "prefer-arrow-callback": RuleMapping(
        description="Use arrow functions for callbacks",
        category=RuleCategory.STYLE,
        do_this="Use arrow functions: array.map((item) => item.value)",
        dont_do_this=(
            "Use function expressions: "
            "array.map(function(item) { return item.value; })"
        ),
    ),
    "object-shorthand": RuleMapping(
        description="Use shorthand syntax for object methods and properties",
        category=RuleCategory.STYLE,
        do_this="Use shorthand: { name, getValue() {} }",
        dont_do_this="Use verbose syntax: { name: name, getValue: function() {} }",
    ),
    "prefer-destructuring": RuleMapping(
        description="Use destructuring for object and array assignments",
        category=RuleCategory.STYLE,
        do_this="Use destructuring: const { name } = obj",
        dont_do_this="Use direct access: const name = obj.name",
    ),
    # Security
    "no-eval": RuleMapping(
        description="Never use eval() - it's a security risk",
        category=RuleCategory.SECURITY,
        do_this="Use safer alternatives like JSON.parse() for data",
        dont_do_this="Use eval() to execute dynamic code",
    ),
    "no-implied-eval": RuleMapping(
        description="Avoid implied eval through setTimeout/setInterval strings",
        category=RuleCategory.SECURITY,
        do_this="Use setTimeout(() => { /* code */ }, 100)",
        dont_do_this='Use setTimeout("code", 100)',
    ),
    "no-new-func": RuleMapping(
        description="Avoid creating functions with the Function constructor",
        category=RuleCategory.SECURITY,
        do_this="Use regular function declarations or arrow functions",
        dont_do_this='Use new Function("a", "return a")',
    ),
    # Error handling
    "no-throw-literal": RuleMapping(
        description="Throw Error objects instead of literals",
        category=RuleCategory.CODE_QUALITY,
        do_this='throw new Error("Something went wrong")',
        dont_do_this='throw "Something went wrong"',
    ),
    "no-empty": RuleMapping(
        description="Avoid empty block statements",
        category=RuleCategory.CODE_QUALITY,
        do_this="Add comments explaining why block is empty, or add proper logic",
        dont_do_this="Leave empty catch blocks or if/else blocks",
    ),
    # Async
    "no-async-promise-executor": RuleMapping(
        description="Avoid async function as Promise executor",
        category=RuleCategory.CODE_QUALITY,
        do_this="Use new Promise((resolve) => {}) with proper async handling",
        dont_do_this="Use new Promise(async (resolve) => {})",
    ),
    "require-await": RuleMapping(
        description="Async functions should contain await",
        category=RuleCategory.CODE_QUALITY,
        do_this="Use async only when await is needed, or return a Promise",
        dont_do_this="Create async functions without await",
    ),
    "no-await-in-loop": RuleMapping(
        description="Avoid await inside loops for better performance",
        category=RuleCategory.PERFORMANCE,
        do_this="Use Promise.all() for parallel execution",
        dont_do_this="Use await inside for/while loops",
    ),
    "no-return-await": RuleMapping(
        description="Don't return await - just return the promise",
        category=RuleCategory.PERFORMANCE,
        do_this="return promise (except in try/catch)",
        dont_do_this="return await promise",
    ),
    # Complexity
    "no-nested-ternary": RuleMapping(
        description="Avoid nested ternary operators",
        category=RuleCategory.CODE_QUALITY,
        do_this="Use if/else statements or extract to variables",
        dont_do_this="Use nested ternaries: a ? b ? c : d : e",
    ),
    "max-depth": RuleMapping(
        description="Limit nesting depth for better readability",
        category=RuleCategory.CODE_QUALITY,
        do_this="Use early returns and extract functions to reduce nesting",
        dont_do_this="Create deeply nested code structures",
    ),
    "complexity": RuleMapping(
        description="Keep functions simple with limited cyclomatic complexity",
        category=RuleCategory.CODE_QUALITY,
        do_this="Break complex functions into smaller, focused functions",
        dont_do_this="Create functions with too many branches and conditions",
    ),
}
