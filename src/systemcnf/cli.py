from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError as PydanticValidationError

from systemcnf.codec import encode, parse_video_mode
from systemcnf.errors import DecodeError
from systemcnf.models.system_cnf import SystemCnfModel
from systemcnf.util.assertx import ValidationError
from systemcnf.util.io import (
    CodecOptions,
    read_json,
    read_system_cnf,
    write_json,
    write_system_cnf,
)
from systemcnf.util.logging import configure_logging, log_indent
from systemcnf.util.schemas import write_model_schema

LOGGER = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1) from exc


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v")) -> None:
    configure_logging(verbose)


@app.command("decode")
def decode_cmd(
    path: Path = typer.Argument(..., dir_okay=False),
    json_out: Optional[Path] = typer.Option(None, "--json-out", dir_okay=False),
) -> None:
    """Parse a SYSTEM.CNF file and print it as JSON."""
    LOGGER.info("Decoding %s", path)
    try:
        model = read_system_cnf(path)
    except (DecodeError, ValidationError) as exc:
        _fail(exc)
    with log_indent():
        LOGGER.info("BOOT2 %s, VER %s, VMODE %s", model.elf_path, model.version, model.video_mode)
    if json_out is not None:
        write_json(json_out, model)
        LOGGER.info("Wrote %s", json_out)
        return
    typer.echo(json.dumps(model.model_dump(mode="json"), indent=2))


@app.command("encode")
def encode_cmd(
    boot2: Optional[str] = typer.Option(None, "--boot2"),
    ver: Optional[str] = typer.Option(None, "--ver"),
    vmode: Optional[str] = typer.Option(None, "--vmode"),
    hdd_unit_power: Optional[str] = typer.Option(None, "--hdd-unit-power"),
    from_json: Optional[Path] = typer.Option(None, "--from-json", dir_okay=False),
    out: Optional[Path] = typer.Option(None, "--out", dir_okay=False),
    lf: bool = typer.Option(False, "--lf", help="Use LF line endings instead of CRLF"),
) -> None:
    """Build a SYSTEM.CNF from field values or a JSON document."""
    options = CodecOptions(newline="\n") if lf else CodecOptions()
    try:
        if from_json is not None:
            model = read_json(from_json, SystemCnfModel)
        else:
            if boot2 is None or ver is None or vmode is None:
                typer.echo("Error: --boot2, --ver and --vmode are required unless --from-json")
                raise typer.Exit(code=2)
            model = SystemCnfModel(
                elf_path=boot2,
                version=ver,
                video_mode=parse_video_mode(vmode),
                hdd_unit_power=hdd_unit_power,
            )
    except (DecodeError, ValidationError, PydanticValidationError) as exc:
        _fail(exc)

    if out is not None:
        try:
            write_system_cnf(out, model, options)
        except ValidationError as exc:
            _fail(exc)
        LOGGER.info("Wrote %s", out)
        return
    typer.echo(encode(model, options.newline), nl=False)


@app.command("schema")
def schema_cmd(
    out: Path = typer.Option(..., "--out", file_okay=False, dir_okay=True),
) -> None:
    """Export the JSON Schema of the decoded record."""
    out.mkdir(parents=True, exist_ok=True)
    try:
        schema_path = write_model_schema(out, "system_cnf", SystemCnfModel)
    except ValidationError as exc:
        _fail(exc)
    typer.echo(str(schema_path))


if __name__ == "__main__":
    app()
