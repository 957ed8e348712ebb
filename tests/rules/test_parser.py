"""Tests for the rule frontmatter parser."""

from pathlib import Path

import pytest

from agents_md.errors import InvalidFrontmatterError, UnreadableRuleError
from agents_md.rules.models import Impact, RuleFrontmatter
from agents_md.rules.parser import parse_frontmatter, parse_rule


def test_parse_all_fields() -> None:
    text = "---\ntitle: X\nimpact: HIGH\nimpactDescription: Y\ntags: a,b\n---\nBody.\n"
    frontmatter, body = parse_frontmatter(text)
    assert frontmatter == RuleFrontmatter(
        title="X", impact="HIGH", impact_description="Y", tags="a,b"
    )
    assert body == "Body."


def test_parse_defaults_when_fields_missing() -> None:
    frontmatter, body = parse_frontmatter("---\ntitle: Only title\n---\n\nBody\n")
    assert frontmatter.title == "Only title"
    assert frontmatter.impact == "MEDIUM"
    assert frontmatter.impact_description == ""
    assert frontmatter.tags == ""
    assert body == "Body"


def test_value_keeps_text_after_first_colon() -> None:
    frontmatter, _ = parse_frontmatter(
        "---\ntitle: Routing: path params\n---\nx\n"
    )
    assert frontmatter.title == "Routing: path params"


def test_skips_lines_without_colon_or_empty_parts() -> None:
    text = (
        "---\n"
        "just some text\n"
        "title:\n"
        ": orphan value\n"
        "   :   \n"
        "tags: ok\n"
        "---\n"
        "body\n"
    )
    frontmatter, _ = parse_frontmatter(text)
    assert frontmatter.title == ""
    assert frontmatter.tags == "ok"


def test_unknown_keys_are_ignored() -> None:
    frontmatter, _ = parse_frontmatter("---\nauthor: someone\ntitle: T\n---\nb\n")
    assert frontmatter == RuleFrontmatter(title="T")


def test_unknown_impact_is_kept_as_is() -> None:
    frontmatter, _ = parse_frontmatter("---\nimpact: SEVERE\n---\nb\n")
    assert frontmatter.impact == "SEVERE"
    assert frontmatter.impact_level is None


def test_impact_level_and_tag_list() -> None:
    frontmatter, _ = parse_frontmatter("---\nimpact: LOW\ntags: a, b ,,c\n---\nb\n")
    assert frontmatter.impact_level is Impact.LOW
    assert frontmatter.tag_list == ["a", "b", "c"]


def test_body_is_stripped_and_keeps_inner_separators() -> None:
    text = "---\ntitle: T\n---\n\n\n## Heading\n\n---\n\nMore\n\n\n"
    _, body = parse_frontmatter(text)
    assert body == "## Heading\n\n---\n\nMore"


@pytest.mark.parametrize(
    "text",
    [
        "title: T\n---\nbody\n",
        "\n---\ntitle: T\n---\nbody\n",
        "---\ntitle: T\nbody without closing delimiter\n",
        "---\ntitle: T\n---",
        "",
    ],
)
def test_invalid_frontmatter_raises(text: str) -> None:
    with pytest.raises(InvalidFrontmatterError):
        parse_frontmatter(text)


def test_invalid_frontmatter_error_names_file() -> None:
    with pytest.raises(InvalidFrontmatterError) as excinfo:
        parse_frontmatter("no header", filename="core-broken.md")
    assert "Invalid frontmatter" in str(excinfo.value)
    assert "core-broken.md" in str(excinfo.value)


def test_parse_rule_from_file(tmp_path: Path) -> None:
    path = tmp_path / "setup-app.md"
    path.write_text(
        "---\ntitle: Create an app\nimpact: CRITICAL\n---\n\n## Create\n",
        encoding="utf-8",
    )
    rule = parse_rule(path)
    assert rule.filename == "setup-app.md"
    assert rule.source_path == path
    assert rule.frontmatter.impact_level is Impact.CRITICAL
    assert rule.body == "## Create"


def test_crlf_rule_is_invalid_frontmatter(tmp_path: Path) -> None:
    path = tmp_path / "core-crlf.md"
    path.write_bytes(b"---\r\ntitle: T\r\n---\r\nline1\r\nline2\r\n")
    with pytest.raises(InvalidFrontmatterError, match="core-crlf.md"):
        parse_rule(path)


def test_crlf_body_lines_are_kept(tmp_path: Path) -> None:
    path = tmp_path / "core-mixed.md"
    path.write_bytes(b"---\ntitle: T\n---\nline1\r\nline2\r\n")
    rule = parse_rule(path)
    assert rule.body == "line1\r\nline2"


def test_non_utf8_rule_is_unreadable(tmp_path: Path) -> None:
    path = tmp_path / "setup-binary.md"
    path.write_bytes(b"---\ntitle: \xff\n---\nbody\n")
    with pytest.raises(UnreadableRuleError) as excinfo:
        parse_rule(path)
    assert excinfo.value.path == path
