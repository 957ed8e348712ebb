from typing import Final


AGENTS_FILENAME: Final[str] = "AGENTS.md"
METADATA_FILENAME: Final[str] = "metadata.json"

RULES_DIRNAME: Final[str] = "rules"
RULE_SUFFIX: Final[str] = ".md"

SECTION_SEPARATOR: Final[str] = "\n\n---\n\n"
