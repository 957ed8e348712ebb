import sys
import json
from pathlib import Path
from typing import Callable

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


METADATA = {
    "abstract": "Guidance for building apps with Hono.",
    "version": "1.0.0",
    "status": "stable",
    "generatedAt": "2026-01-15",
    "sourceRepo": "https://github.com/honojs/hono",
    "sourceVersion": "4.6.0",
}


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def write_json():
    def _write(path: Path, payload: dict) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")

    return _write


@pytest.fixture
def skill_root(tmp_path: Path, write_json) -> Path:
    root = tmp_path / "skill"
    write_json(root / "metadata.json", METADATA)
    (root / "rules").mkdir(parents=True)
    return root


@pytest.fixture
def write_rule(skill_root: Path) -> Callable[..., Path]:
    def _write(
        filename: str,
        body: str,
        title: str = "A rule",
        impact: str = "HIGH",
    ) -> Path:
        path = skill_root / "rules" / filename
        path.write_text(
            "---\n"
            f"title: {title}\n"
            f"impact: {impact}\n"
            "impactDescription: matters\n"
            "tags: hono, test\n"
            "---\n"
            "\n"
            f"{body}\n",
            encoding="utf-8",
        )
        return path

    return _write


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def metadata_payload() -> dict:
    return dict(METADATA)
