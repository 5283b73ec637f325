from typing import Final


APP_DIRNAME: Final[str] = "code-context"
SETTINGS_FILENAME: Final[str] = "settings.json"

ESLINT_CONFIG_FILES: Final[tuple[str, ...]] = (
    ".eslintrc",
    ".eslintrc.js",
    ".eslintrc.json",
    ".eslintrc.yaml",
    ".eslintrc.yml",
    "package.json",
)
PACKAGE_JSON_FILENAME: Final[str] = "package.json"
PACKAGE_JSON_ESLINT_KEY: Final[str] = "eslintConfig"

DEFAULT_ESLINT_COMMAND: Final[tuple[str, ...]] = ("npx", "eslint")
DEFAULT_PROBE_FILE: Final[str] = "dummy.ts"
DEFAULT_PROBE_TIMEOUT: Final[float] = 30.0
# eslint exits 1 when the probed file has violations but config still resolved
PROBE_SUCCESS_EXIT_CODES: Final[frozenset[int]] = frozenset({0, 1})

RULE_FILES: Final[tuple[str, ...]] = (
    ".clinerules",
    ".cursorrules",
    ".windsurfrules",
)
MODE_RULE_FILE_PREFIX: Final[str] = ".clinerules-"
IGNORE_FILENAME: Final[str] = ".clineignore"

INSTRUCTIONS_BANNER: Final[str] = (
    "====\n"
    "\n"
    "USER'S CUSTOM INSTRUCTIONS\n"
    "\n"
    "The following additional instructions are provided by the user, and should "
    "be followed to the best of your ability without interfering with the TOOL "
    "USE guidelines."
)
