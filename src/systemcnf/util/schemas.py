from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from systemcnf.util.assertx import assert_in_out_dir
from systemcnf.util.io import write_raw_json

SCHEMA_DIR = "schemas"


def schema_path_for(out_dir: Path, name: str) -> Path:
    return out_dir / SCHEMA_DIR / f"{name}.schema.json"


def write_model_schema(out_dir: Path, name: str, model: type[BaseModel]) -> Path:
    """Write the JSON Schema of `model` under `<out_dir>/schemas/`."""
    schema_path = schema_path_for(out_dir, name)
    assert_in_out_dir(schema_path, out_dir)
    write_raw_json(schema_path, model.model_json_schema())
    return schema_path
