from typing import Final


MARKER_START: Final[str] = "<!-- pleaseai-lint:start -->"
MARKER_END: Final[str] = "<!-- pleaseai-lint:end -->"

ESLINT_CONFIG_FILES: Final[tuple[str, ...]] = (
    "eslint.config.js",
    "eslint.config.mjs",
    "eslint.config.cjs",
    "eslint.config.ts",
    "eslint.config.mts",
    "eslint.config.cts",
)

TARGET_FILE_CANDIDATES: Final[tuple[str, ...]] = (
    "src/index.ts",
    "src/index.js",
    "src/main.ts",
    "src/main.js",
    "index.ts",
    "index.js",
    "src/App.tsx",
    "src/App.jsx",
)

ESLINT_COMMAND: Final[tuple[str, ...]] = ("npx", "eslint")
PRINT_CONFIG_TIMEOUT_SECONDS: Final[int] = 30
DIAGNOSTIC_PREVIEW_CHARS: Final[int] = 200

SETTINGS_FILENAMES: Final[tuple[str, ...]] = (
    ".pleaseai-lint.yaml",
    ".pleaseai-lint.yml",
)

CI_ENV_VAR: Final[str] = "CI"
CI_TRUTHY_VALUES: Final[tuple[str, ...]] = ("true", "1")

CHECK_COMMAND: Final[str] = "npx eslint ."
FIX_COMMAND: Final[str] = "npx eslint . --fix"
