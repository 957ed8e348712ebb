"""Parse rule files with a flat ``key: value`` frontmatter header."""

from __future__ import annotations

import re
from pathlib import Path

from agents_md.errors import InvalidFrontmatterError, UnreadableRuleError
from agents_md.rules.models import ParsedRule, RuleFrontmatter
from agents_md.utils import read_text_exact

_FRONTMATTER_RE = re.compile(r"\A---\n(.*?)\n---\n(.*)\Z", re.DOTALL)

# header key -> RuleFrontmatter field
_FIELDS = {
    "title": "title",
    "impact": "impact",
    "impactDescription": "impact_description",
    "tags": "tags",
}


def _parse_header(header: str) -> dict[str, str]:
    values: dict[str, str] = {}
    for line in header.split("\n"):
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()
        if not key or not value:
            continue
        field_name = _FIELDS.get(key)
        if field_name is not None:
            values[field_name] = value
    return values


def parse_frontmatter(text: str, filename: str = "") -> tuple[RuleFrontmatter, str]:
    match = _FRONTMATTER_RE.match(text)
    if not match:
        raise InvalidFrontmatterError(filename)

    frontmatter = RuleFrontmatter(**_parse_header(match.group(1)))
    return frontmatter, match.group(2).strip()


def parse_rule(path: Path) -> ParsedRule:
    try:
        text = read_text_exact(path)
    except UnicodeDecodeError as exc:
        raise UnreadableRuleError(path, str(exc)) from exc
    frontmatter, body = parse_frontmatter(text, filename=path.name)
    return ParsedRule(
        filename=path.name,
        source_path=path,
        frontmatter=frontmatter,
        body=body,
    )
