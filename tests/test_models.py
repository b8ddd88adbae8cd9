from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from systemcnf.models.enums import VideoMode
from systemcnf.models.system_cnf import SystemCnfModel, strip_padding


def test_model_accepts_token_strings() -> None:
    model = SystemCnfModel(elf_path="cdrom0:\\A.ELF;1", version="1.00", video_mode="PAL")

    assert model.video_mode is VideoMode.PAL
    assert model.hdd_unit_power is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"elf_path": ""},
        {"version": ""},
        {"hdd_unit_power": ""},
        {"version": "1.00\r\nVMODE = PAL"},
        {"elf_path": " cdrom0:\\A.ELF;1"},
        {"hdd_unit_power": "on\x00"},
        {"video_mode": "SECAM"},
        {"extra": "nope"},
    ],
)
def test_invalid_records_rejected(overrides: dict) -> None:
    payload = {"elf_path": "cdrom0:\\A.ELF;1", "version": "1.00", "video_mode": "NTSC"}
    payload.update(overrides)
    with pytest.raises(PydanticValidationError):
        SystemCnfModel.model_validate(payload)


def test_model_is_frozen() -> None:
    model = SystemCnfModel(elf_path="cdrom0:\\A.ELF;1", version="1.00", video_mode="NTSC")
    with pytest.raises(PydanticValidationError):
        model.version = "2.00"


def test_strip_padding_handles_nul_and_whitespace() -> None:
    assert strip_padding(" \x00 PAL\t\x00") == "PAL"
    assert strip_padding("A B") == "A B"
