from __future__ import annotations

from pathlib import Path


def fixtures_dir() -> Path:
    return Path(__file__).resolve().parent / "fixtures"


def fixture_path(name: str) -> Path:
    return fixtures_dir() / name
