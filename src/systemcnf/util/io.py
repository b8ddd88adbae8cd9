from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel

from systemcnf.codec import DEFAULT_ENCODING, DEFAULT_NEWLINE, decode_bytes, encode
from systemcnf.models.system_cnf import SystemCnfModel
from systemcnf.util.assertx import ValidationError, assert_file_exists

LOGGER = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class CodecOptions:
    def __init__(
        self,
        newline: str = DEFAULT_NEWLINE,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self.newline = newline
        self.encoding = encoding


def read_system_cnf(path: Path, options: CodecOptions | None = None) -> SystemCnfModel:
    options = options or CodecOptions()
    assert_file_exists(path)
    LOGGER.debug("Reading %s", path)
    return decode_bytes(path.read_bytes(), options.encoding)


def write_system_cnf(
    path: Path, model: SystemCnfModel, options: CodecOptions | None = None
) -> None:
    options = options or CodecOptions()
    try:
        raw = encode(model, options.newline).encode(options.encoding)
    except UnicodeEncodeError as exc:
        bad = exc.object[exc.start : exc.end]
        raise ValidationError(f"Cannot write {bad!r} as {options.encoding}: {path}") from exc
    path.parent.mkdir(parents=True, exist_ok=True)
    # Bytes, so the platform never rewrites the line endings.
    path.write_bytes(raw)
    LOGGER.debug("Wrote %s", path)


def read_json(path: Path, model_type: type[T]) -> T:
    assert_file_exists(path, f"JSON file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    return model_type.model_validate(payload)


def write_json(path: Path, model: BaseModel) -> None:
    write_raw_json(path, model.model_dump(mode="json"))


def write_raw_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, ensure_ascii=False, indent=2)
