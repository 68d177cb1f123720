from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from jsonschema.validators import Draft202012Validator as Validator

# Resolve repo root (two levels up from this file) and schemas root
REPO_ROOT = Path(__file__).resolve().parents[2]
SCHEMAS_ROOT = REPO_ROOT / "pipeline" / "schemas"


def load_schema(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        schema = yaml.safe_load(f)
    Validator.check_schema(schema)
    return schema


def load_named_schema(name: str, schemas_root: Path | None = None) -> dict[str, Any]:
    return load_schema((schemas_root or SCHEMAS_ROOT) / f"{name}.schema.yaml")


def validate_obj(schema: dict[str, Any], obj: dict[str, Any]) -> None:
    Validator(schema).validate(obj)
