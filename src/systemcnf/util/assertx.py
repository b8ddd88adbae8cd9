from __future__ import annotations

from pathlib import Path


class ValidationError(RuntimeError):
    """A file-level precondition failed before any decoding happened."""


def assert_file_exists(path: Path, message: str | None = None) -> None:
    if not path.is_file():
        raise ValidationError(message or f"SYSTEM.CNF not found: {path}")


def assert_in_out_dir(path: Path, out_dir: Path) -> None:
    try:
        resolved = path.resolve()
        base = out_dir.resolve()
    except FileNotFoundError:
        resolved = path.absolute()
        base = out_dir.absolute()
    if resolved != base and base not in resolved.parents:
        raise ValidationError(f"Refusing to write outside {out_dir}: {path}")
