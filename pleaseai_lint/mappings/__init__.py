from pleaseai_lint.mappings.core import CORE_RULE_MAPPINGS
from pleaseai_lint.mappings.react import REACT_RULE_MAPPINGS
from pleaseai_lint.mappings.resolver import RULE_MAPPINGS, get_rule_mapping
from pleaseai_lint.mappings.typescript import TYPESCRIPT_RULE_MAPPINGS

__all__ = [
    "CORE_RULE_MAPPINGS",
    "REACT_RULE_MAPPINGS",
    "RULE_MAPPINGS",
    "TYPESCRIPT_RULE_MAPPINGS",
    "get_rule_mapping",
]
