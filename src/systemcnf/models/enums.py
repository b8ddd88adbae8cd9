from __future__ import annotations

from enum import StrEnum


class VideoMode(StrEnum):
    NTSC = "NTSC"
    PAL = "PAL"
