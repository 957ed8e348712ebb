from agents_md.rules.models import Impact, ParsedRule, RuleFrontmatter
from agents_md.rules.parser import parse_frontmatter, parse_rule
from agents_md.rules.repository import RulesRepository

__all__ = [
    "Impact",
    "ParsedRule",
    "RuleFrontmatter",
    "RulesRepository",
    "parse_frontmatter",
    "parse_rule",
]
