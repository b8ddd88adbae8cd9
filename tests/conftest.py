from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tests.helpers import fixture_path  # noqa: E402


@pytest.fixture
def slus_bytes() -> bytes:
    return fixture_path("SLUS_213.48.CNF").read_bytes()
