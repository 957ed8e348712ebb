"""Rule data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Impact(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


@dataclass(frozen=True)
class RuleFrontmatter:
    title: str = ""
    impact: str = Impact.MEDIUM.value
    impact_description: str = ""
    tags: str = ""

    @property
    def impact_level(self) -> Impact | None:
        try:
            return Impact(self.impact)
        except ValueError:
            return None

    @property
    def tag_list(self) -> list[str]:
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]


@dataclass(frozen=True)
class ParsedRule:
    filename: str
    source_path: Path
    frontmatter: RuleFrontmatter
    body: str
