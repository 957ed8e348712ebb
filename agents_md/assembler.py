"""Render the aggregated AGENTS.md document."""

from __future__ import annotations

from typing import Sequence

from agents_md.categories import CATEGORIES, group_rules
from agents_md.constants import SECTION_SEPARATOR
from agents_md.metadata import Metadata
from agents_md.rules.models import ParsedRule

DOCUMENT_TITLE = "# Hono Web Framework Skill"
SOURCE_LABEL = "honojs/hono"

QUICK_REFERENCE = """## Quick Reference

### Minimal App
```typescript
import { Hono } from 'hono'

const app = new Hono()
app.get('/', (c) => c.text('Hello Hono!'))

export default app
```

### Key Differences from Express
| Express | Hono |
|---------|------|
| `req.params.id` | `c.req.param('id')` |
| `res.json(data)` | `return c.json(data)` |
| `next()` callback | `await next()` async |
| `process.env` | `c.env` (Workers) |"""

REFERENCES = """## References

- [Hono Documentation](https://hono.dev)
- [Getting Started](https://hono.dev/docs/getting-started/basic)
- [API Reference](https://hono.dev/docs/api/hono)"""

_RULE = "---"


def render_section(rules: Sequence[ParsedRule]) -> str:
    return SECTION_SEPARATOR.join(rule.body for rule in rules)


def render_header(metadata: Metadata) -> str:
    parts: list[str] = []
    parts.append(DOCUMENT_TITLE)
    parts.append("")
    parts.append(f"> {metadata.abstract}")
    parts.append("")
    parts.append(
        f"**Version**: {metadata.version} | **Status**: {metadata.status}"
        f" | **Generated**: {metadata.generated_at}"
    )
    parts.append(
        f"**Source**: [{SOURCE_LABEL}]({metadata.source_repo})"
        f" @ v{metadata.source_version}"
    )
    return "\n".join(parts)


def render_document(metadata: Metadata, rules: Sequence[ParsedRule]) -> str:
    groups = group_rules(rules)

    blocks: list[str] = [render_header(metadata), _RULE, QUICK_REFERENCE, _RULE]
    for category in CATEGORIES:
        blocks.append(f"## {category.title}")
        blocks.append(render_section(groups[category]))
        blocks.append(_RULE)
    blocks.append(REFERENCES)
    blocks.append(_RULE)
    blocks.append(f"*Generated from {len(rules)} rules.*")
    return "\n\n".join(blocks) + "\n"
