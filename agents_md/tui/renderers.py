from typing import Sequence

from rich.console import Console

from agents_md.builder import BuildResult
from agents_md.rules.models import ParsedRule
from agents_md.tui.enums import UIStyle
from agents_md.tui.sections import UISection
from agents_md.tui.tables import RulesTable
from agents_md.utils import compact_home_path


class BuildConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_build_result(self, result: BuildResult) -> None:
        self.console.print(
            f"✅ Built {result.output_path.name}"
            f" ({result.char_count} chars, {result.rule_count} rules)",
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def render_check_result(self, result: BuildResult, up_to_date: bool) -> None:
        path = compact_home_path(result.output_path)
        if up_to_date:
            self.console.print(
                UISection.note("check", f"{path} is up to date.", style=UIStyle.GREEN.value)
            )
            return
        self.console.print(
            UISection.note(
                "check",
                f"{path} is out of date. Run the build to regenerate it.",
                style=UIStyle.YELLOW.value,
            )
        )

    def render_rules(self, rules: Sequence[ParsedRule]) -> None:
        self.console.print(
            UISection.wrap(
                "rules overview",
                RulesTable.summary_block(rules),
                style=UIStyle.BLUE.value,
            )
        )
        if not rules:
            self.console.print(UISection.note("rules", "No rules found."))
            return
        self.console.print(
            UISection.wrap(
                "rules",
                RulesTable.rules_table(rules),
                style=UIStyle.CYAN.value,
            )
        )
