"""Load and validate the skill metadata descriptor."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from agents_md.errors import (
    InvalidConfigSchemaError,
    InvalidJsonFormatError,
    MissingConfigFileError,
)
from agents_md.utils import read_json

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "metadata.schema.json"


@dataclass(frozen=True)
class Metadata:
    abstract: str
    version: str
    status: str
    generated_at: str
    source_repo: str
    source_version: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Metadata":
        return cls(
            abstract=payload["abstract"],
            version=payload["version"],
            status=payload["status"],
            generated_at=payload["generatedAt"],
            source_repo=payload["sourceRepo"],
            source_version=payload["sourceVersion"],
        )


def load_json_schema(path: Path) -> dict[str, Any]:
    return json.loads(path.read_text(encoding="utf-8"))


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


_VALIDATOR = Draft202012Validator(load_json_schema(SCHEMA_PATH))


def load_metadata(path: Path) -> Metadata:
    if not path.is_file():
        raise MissingConfigFileError(path)
    try:
        payload = read_json(path)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonFormatError(path, str(exc)) from exc

    error = next(iter(_VALIDATOR.iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(path, format_schema_error(error))
    return Metadata.from_payload(payload)
