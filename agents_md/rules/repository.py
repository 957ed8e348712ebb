"""Read rule files from a skill root."""

from __future__ import annotations

from pathlib import Path

from agents_md.constants import RULE_SUFFIX, RULES_DIRNAME
from agents_md.errors import MissingRulesDirectoryError
from agents_md.rules.models import ParsedRule
from agents_md.rules.parser import parse_rule


class RulesRepository:
    def __init__(self, root: Path) -> None:
        self._rules_dir = root / RULES_DIRNAME

    @property
    def rules_dir(self) -> Path:
        return self._rules_dir

    def list_rule_files(self) -> list[Path]:
        if not self._rules_dir.is_dir():
            raise MissingRulesDirectoryError(self._rules_dir)
        names = sorted(
            child.name
            for child in self._rules_dir.iterdir()
            if child.name.endswith(RULE_SUFFIX)
        )
        return [self._rules_dir / name for name in names]

    def list_rules(self) -> list[ParsedRule]:
        return [parse_rule(path) for path in self.list_rule_files()]
