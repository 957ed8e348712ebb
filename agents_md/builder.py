"""Build AGENTS.md from a skill root."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from agents_md.assembler import render_document
from agents_md.categories import Category, group_rules, uncategorized
from agents_md.constants import AGENTS_FILENAME, METADATA_FILENAME
from agents_md.metadata import Metadata, load_metadata
from agents_md.rules.models import ParsedRule
from agents_md.rules.repository import RulesRepository
from agents_md.utils import read_text_if_exists, write_text


@dataclass(frozen=True)
class BuildResult:
    output_path: Path
    metadata: Metadata
    rules: tuple[ParsedRule, ...]
    content: str

    @property
    def char_count(self) -> int:
        # UTF-16 code units, so astral characters count twice
        return len(self.content.encode("utf-16-le")) // 2

    @property
    def rule_count(self) -> int:
        return len(self.rules)

    @property
    def sections(self) -> dict[Category, list[ParsedRule]]:
        return group_rules(self.rules)

    @property
    def uncategorized(self) -> list[ParsedRule]:
        return uncategorized(self.rules)


class AgentsBuilder:
    """Assemble the rules under ``root`` into a single AGENTS.md.

    ``build`` only reads; ``write`` is the one side effect, so a failure
    while loading metadata or parsing any rule leaves an existing output
    file untouched.
    """

    def __init__(self, root: Path, output_path: Path | None = None) -> None:
        self._root = root
        self._rules = RulesRepository(root)
        self._output_path = output_path or root / AGENTS_FILENAME

    @property
    def root(self) -> Path:
        return self._root

    @property
    def metadata_path(self) -> Path:
        return self._root / METADATA_FILENAME

    @property
    def output_path(self) -> Path:
        return self._output_path

    @property
    def rules(self) -> RulesRepository:
        return self._rules

    def build(self) -> BuildResult:
        metadata = load_metadata(self.metadata_path)
        rules = tuple(self._rules.list_rules())
        return BuildResult(
            output_path=self._output_path,
            metadata=metadata,
            rules=rules,
            content=render_document(metadata, rules),
        )

    def write(self, result: BuildResult) -> None:
        write_text(result.output_path, result.content)

    def is_up_to_date(self, result: BuildResult) -> bool:
        return read_text_if_exists(result.output_path) == result.content
