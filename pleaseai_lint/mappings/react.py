"""React, React Hooks and jsx-a11y rule mappings."""

from pleaseai_lint.mappings.models import RuleMapping
from pleaseai_lint.models import RuleCategory

REACT_RULE_MAPPINGS: dict[str, RuleMapping] = {
    # React core
    "react/jsx-key": RuleMapping(
        description="Provide unique key props for elements in arrays",
        category=RuleCategory.REACT,
        do_this="Add unique key prop to elements in .map() or arrays",
        dont_do_this="Use array index as key or omit key props",
    ),
    "react/jsx-no-target-blank": RuleMapping(
        description='Add rel="noopener noreferrer" to links with target="_blank"',
        category=RuleCategory.SECURITY,
        do_this='Add rel="noopener noreferrer" when using target="_blank"',
        dont_do_this='Use target="_blank" without proper rel attribute',
    ),
    "react/no-unescaped-entities": RuleMapping(
        description="Escape special characters in JSX text",
        category=RuleCategory.REACT,
        do_this="Use HTML entities: &apos; &quot; &gt; &lt;",
        dont_do_this="Use unescaped quotes or special characters in JSX",
    ),
    "react/jsx-no-useless-fragment": RuleMapping(
        description="Avoid unnecessary fragments",
        category=RuleCategory.REACT,
        do_this="Remove fragments that wrap a single child",
        dont_do_this="Wrap single elements in unnecessary <> </> or <Fragment>",
    ),
    "react/jsx-curly-brace-presence": RuleMapping(
        description="Use consistent curly braces in JSX",
        category=RuleCategory.STYLE,
        do_this="Be consistent with curly braces in JSX props",
        dont_do_this='Mix {"string"} and "string" inconsistently',
    ),
    "react/self-closing-comp": RuleMapping(
        description="Use self-closing tags for components without children",
        category=RuleCategory.STYLE,
        do_this="Use <Component /> for components without children",
        dont_do_this="Use <Component></Component> when there are no children",
    ),
    "react/no-array-index-key": RuleMapping(
        description="Avoid using array index as key",
        category=RuleCategory.REACT,
        do_this="Use unique, stable identifiers as keys",
        dont_do_this="Use array index as key prop in lists",
    ),
    "react/no-danger": RuleMapping(
        description="Avoid dangerouslySetInnerHTML",
        category=RuleCategory.SECURITY,
        do_this="Use safer alternatives or sanitize HTML content",
        dont_do_this="Use dangerouslySetInnerHTML without careful consideration",
    ),
    "react/no-deprecated": RuleMapping(
        description="Avoid deprecated React APIs",
        category=RuleCategory.REACT,
        do_this="Use current React APIs and patterns",
        dont_do_this="Use deprecated methods like componentWillMount",
    ),
    "react/no-direct-mutation-state": RuleMapping(
        description="Never mutate state directly",
        category=RuleCategory.REACT,
        do_this="Use setState() or state setter from useState()",
        dont_do_this="Mutate this.state directly",
    ),
    "react/no-unstable-nested-components": RuleMapping(
        description="Don't define components inside other components",
        category=RuleCategory.REACT,
        do_this="Define components at module level",
        dont_do_this="Define components inside render or function body",
    ),
    "react/function-component-definition": RuleMapping(
        description="Use consistent function component definition",
        category=RuleCategory.STYLE,
        do_this="Use consistent style for function components",
        dont_do_this="Mix arrow functions and function declarations for components",
    ),
    "react/prop-types": RuleMapping(
        description="Define prop types for components",
        category=RuleCategory.TYPE_SAFETY,
        do_this="Use TypeScript interfaces or PropTypes",
        dont_do_this="Leave props untyped",
    ),
    # React hooks
    "react-hooks/rules-of-hooks": RuleMapping(
        description="Follow the Rules of Hooks",
        category=RuleCategory.REACT,
        do_this="Call hooks at the top level of function components",
        dont_do_this="Call hooks inside loops, conditions, or nested functions",
    ),
    "react-hooks/exhaustive-deps": RuleMapping(
        description="Include all dependencies in hook dependency arrays",
        category=RuleCategory.REACT,
        do_this="List all variables from component scope used in the effect",
        dont_do_this="Omit dependencies or suppress the warning",
    ),
    # Accessibility
    "jsx-a11y/alt-text": RuleMapping(
        description="Provide alt text for images",
        category=RuleCategory.REACT,
        do_this='Add meaningful alt text: <img alt="Description" />',
        dont_do_this="Omit alt attribute or use empty alt for meaningful images",
    ),
    "jsx-a11y/anchor-is-valid": RuleMapping(
        description="Ensure anchors are valid",
        category=RuleCategory.REACT,
        do_this="Use proper href or use a button for actions",
        dont_do_this='Use <a href="#"> or <a href="javascript:void(0)">',
    ),
    "jsx-a11y/click-events-have-key-events": RuleMapping(
        description="Add keyboard handlers alongside click handlers",
        category=RuleCategory.REACT,
        do_this="Add onKeyDown/onKeyUp handlers with onClick",
        dont_do_this="Add onClick without keyboard support",
    ),
    "jsx-a11y/no-static-element-interactions": RuleMapping(
        description="Add roles to interactive non-semantic elements",
        category=RuleCategory.REACT,
        do_this="Use semantic elements or add appropriate role",
        dont_do_this="Add click handlers to divs without role",
    ),
    "jsx-a11y/label-has-associated-control": RuleMapping(
        description="Associate labels with form controls",
        category=RuleCategory.REACT,
        do_this="Use htmlFor or nest input inside label",
        dont_do_this="Create labels without associated form controls",
    ),
    "jsx-a11y/heading-has-content": RuleMapping(
        description="Ensure headings have content",
        category=RuleCategory.REACT,
        do_this="Add visible content to heading elements",
        dont_do_this="Create empty h1-h6 elements",
    ),
    "jsx-a11y/no-autofocus": RuleMapping(
        description="Avoid autofocus attribute",
        category=RuleCategory.REACT,
        do_this="Use focus management with refs when needed",
        dont_do_this="Use autofocus attribute which can be disorienting",
    ),
}
