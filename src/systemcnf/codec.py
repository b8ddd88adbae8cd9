"""SYSTEM.CNF codec.

Converts between the BIOS-facing text layout and SystemCnfModel:

    BOOT2 = cdrom0:\\SLUS_213.48;1
    VER = 1.00
    VMODE = NTSC

Keys and video-mode tokens are matched case-sensitively. Whitespace around
keys and values is ignored on decode; encode always writes the canonical
" = " separator and field order. No I/O happens here.
"""

from __future__ import annotations

import logging

from systemcnf.errors import MalformedLineError, MissingFieldError, UnknownVideoModeError
from systemcnf.models.enums import VideoMode
from systemcnf.models.system_cnf import SystemCnfModel, strip_padding

LOGGER = logging.getLogger(__name__)

DEFAULT_NEWLINE = "\r\n"
DEFAULT_ENCODING = "ascii"

KEY_BOOT = "BOOT2"
KEY_VERSION = "VER"
KEY_VIDEO_MODE = "VMODE"
KEY_HDD_UNIT_POWER = "HDDUNITPOWER"

KEY_ORDER = (KEY_BOOT, KEY_VERSION, KEY_VIDEO_MODE, KEY_HDD_UNIT_POWER)
REQUIRED_KEYS = (KEY_BOOT, KEY_VERSION, KEY_VIDEO_MODE)


def parse_video_mode(value: str, line_no: int | None = None) -> VideoMode:
    try:
        return VideoMode(value)
    except ValueError:
        raise UnknownVideoModeError(value, line_no) from None


def _split_line(line_no: int, line: str) -> tuple[str, str]:
    key, sep, value = line.partition("=")
    if not sep:
        raise MalformedLineError(line_no, line, "expected KEY = VALUE")
    key = strip_padding(key)
    if not key:
        raise MalformedLineError(line_no, line, "empty key")
    return key, strip_padding(value)


def decode(text: str) -> SystemCnfModel:
    """Parse SYSTEM.CNF text into a model.

    Raises:
        MalformedLineError: a line is not a KEY = VALUE pair, or a known key
            has an empty value.
        UnknownVideoModeError: VMODE is not a known token.
        MissingFieldError: BOOT2, VER or VMODE is absent.
    """
    values: dict[str, str | VideoMode] = {}
    for line_no, raw in enumerate(text.splitlines(), start=1):
        if not strip_padding(raw):
            continue
        key, value = _split_line(line_no, raw)
        if key not in KEY_ORDER:
            LOGGER.debug("Ignoring unknown key %s on line %d", key, line_no)
            continue
        if not value:
            raise MalformedLineError(line_no, raw, f"empty value for {key}")
        if key in values:
            LOGGER.debug("Key %s repeated on line %d, later value wins", key, line_no)
        if key == KEY_VIDEO_MODE:
            values[key] = parse_video_mode(value, line_no)
        else:
            values[key] = value

    for key in REQUIRED_KEYS:
        if key not in values:
            raise MissingFieldError(key)

    return SystemCnfModel(
        elf_path=values[KEY_BOOT],
        version=values[KEY_VERSION],
        video_mode=values[KEY_VIDEO_MODE],
        hdd_unit_power=values.get(KEY_HDD_UNIT_POWER),
    )


def decode_bytes(raw: bytes, encoding: str = DEFAULT_ENCODING) -> SystemCnfModel:
    """Decode raw file bytes, as read off the disc, into a model."""
    try:
        text = raw.decode(encoding)
    except UnicodeDecodeError as exc:
        line_no = raw.count(b"\n", 0, exc.start) + 1
        line = raw.split(b"\n")[line_no - 1].rstrip(b"\r").decode(encoding, errors="replace")
        raise MalformedLineError(line_no, line, f"not valid {encoding}") from exc
    return decode(text)


def encode(model: SystemCnfModel, newline: str = DEFAULT_NEWLINE) -> str:
    """Render a model in canonical key order, one terminated line per field."""
    fields = [
        (KEY_BOOT, model.elf_path),
        (KEY_VERSION, model.version),
        (KEY_VIDEO_MODE, model.video_mode.value),
    ]
    if model.hdd_unit_power is not None:
        fields.append((KEY_HDD_UNIT_POWER, model.hdd_unit_power))
    return "".join(f"{key} = {value}{newline}" for key, value in fields)
