from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, model_validator

from systemcnf.models.enums import VideoMode

# Discs pad SYSTEM.CNF with NULs as well as spaces.
_PADDING_RE = re.compile(r"^[\s\x00]+|[\s\x00]+$")


def strip_padding(value: str) -> str:
    return _PADDING_RE.sub("", value)


def _check_text(name: str, value: str) -> None:
    if not value:
        raise ValueError(f"{name} must be non-empty")
    if len(value.splitlines()) != 1:
        raise ValueError(f"{name} must not contain line breaks")
    if strip_padding(value) != value:
        raise ValueError(f"{name} must not have leading or trailing padding")


class SystemCnfModel(BaseModel):
    """Decoded contents of one SYSTEM.CNF file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    elf_path: str = Field(..., description="Boot target, e.g. cdrom0:\\MAIN.ELF;1")
    version: str
    video_mode: VideoMode
    hdd_unit_power: str | None = None

    @model_validator(mode="after")
    def _validate(self) -> "SystemCnfModel":
        _check_text("elf_path", self.elf_path)
        _check_text("version", self.version)
        if self.hdd_unit_power is not None:
            _check_text("hdd_unit_power", self.hdd_unit_power)
        return self
