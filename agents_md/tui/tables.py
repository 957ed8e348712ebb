from collections import Counter
from typing import Sequence

from rich.table import Column, Table
from rich.text import Text

from agents_md.categories import categorize
from agents_md.rules.models import ParsedRule
from agents_md.tui.enums import IMPACT_STYLE, UIStyle


class RulesTable:
    @staticmethod
    def impact_text(rule: ParsedRule) -> Text:
        level = rule.frontmatter.impact_level
        if level is None:
            return Text(f"{rule.frontmatter.impact} (unknown)", style=UIStyle.RED.value)
        return Text(level.value, style=IMPACT_STYLE[level])

    @staticmethod
    def rules_table(rules: Sequence[ParsedRule]) -> Table:
        table = Table(
            Column("File", style="bold", no_wrap=True),
            Column("Category"),
            Column("Impact", no_wrap=True),
            Column("Title"),
            expand=True,
        )
        for rule in rules:
            category = categorize(rule.filename)
            category_text = (
                Text(category.title)
                if category is not None
                else Text("uncategorized", style=UIStyle.YELLOW.value)
            )
            table.add_row(
                Text(rule.filename),
                category_text,
                RulesTable.impact_text(rule),
                Text(rule.frontmatter.title),
            )
        return table

    @staticmethod
    def summary_block(rules: Sequence[ParsedRule]) -> Table:
        counts = Counter(
            category.title if category is not None else "uncategorized"
            for category in (categorize(rule.filename) for rule in rules)
        )
        chips = [f"{key}={value}" for key, value in sorted(counts.items())]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Rules", str(len(rules)))
        table.add_row("Categories", "  ".join(chips))
        return table
