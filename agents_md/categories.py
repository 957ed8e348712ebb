"""Filename-prefix categories of the aggregated document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from agents_md.rules.models import ParsedRule


@dataclass(frozen=True)
class Category:
    prefix: str
    title: str

    def matches(self, filename: str) -> bool:
        return filename.startswith(self.prefix)


CATEGORIES: tuple[Category, ...] = (
    Category(prefix="setup-", title="Setup & Routing"),
    Category(prefix="core-", title="Core Concepts"),
    Category(prefix="middleware-", title="Middleware"),
    Category(prefix="runtime-", title="Runtime Adapters"),
    Category(prefix="helper-", title="Helpers"),
    Category(prefix="migration-", title="Migration"),
)


def categorize(filename: str) -> Category | None:
    for category in CATEGORIES:
        if category.matches(filename):
            return category
    return None


def group_rules(rules: Iterable[ParsedRule]) -> dict[Category, list[ParsedRule]]:
    """Partition rules by category, keeping input order within each group.

    Every category is present in the result; rules matching no prefix are
    left out.
    """
    groups: dict[Category, list[ParsedRule]] = {category: [] for category in CATEGORIES}
    for rule in rules:
        category = categorize(rule.filename)
        if category is not None:
            groups[category].append(rule)
    return groups


def uncategorized(rules: Iterable[ParsedRule]) -> list[ParsedRule]:
    return [rule for rule in rules if categorize(rule.filename) is None]
