from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO, Optional

from click.core import ParameterSource
import typer

from jsonstr import __version__, codec
from jsonstr.config import FLAG_NAMES, flag_defaults, merge_flags
from jsonstr.exceptions import JsonStrError

app = typer.Typer(add_completion=False)

_NO_INPUT_MESSAGE = "No input provided. Use --file, --json or pipe data to stdin."
_HELP_HINT = "Run 'json-to-string --help' for usage and examples."

_EXAMPLES = """
Encoding (JSON to string):

  json-to-string --file input.json

  json-to-string --json '{"key": "value"}'

  echo '{"key": "value"}' | json-to-string

  json-to-string --compact --file input.json

  json-to-string --file input.json --raw

Decoding (string to JSON):

  json-to-string --decode --json '{\\"key\\":\\"value\\"}'

  json-to-string --decode --pretty --file escaped.txt

  echo '{"key":"value"}' | json-to-string --raw | json-to-string --decode --pretty
"""


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def _fail(message: str) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(code=1)


def _stdin_stream() -> BinaryIO:
    return sys.stdin.buffer


def _read_input(
    file: Path | None,
    json_text: str | None,
    *,
    stdin: BinaryIO,
) -> bytes | str:
    """Pick the input source: file, then inline string, then piped stdin."""
    if file is not None:
        try:
            return file.read_bytes()
        except OSError as exc:
            raise _fail(f"Error reading file: {exc}") from exc
    if json_text:
        return json_text
    if stdin.isatty():
        typer.echo(_NO_INPUT_MESSAGE, err=True)
        raise _fail(_HELP_HINT)
    try:
        return stdin.read()
    except OSError as exc:
        raise _fail(f"Error reading from stdin: {exc}") from exc


def _explicit_flags(ctx: typer.Context, values: dict[str, bool]) -> dict[str, bool | None]:
    explicit: dict[str, bool | None] = {}
    for name in FLAG_NAMES:
        source = ctx.get_parameter_source(name)
        explicit[name] = values[name] if source is ParameterSource.COMMANDLINE else None
    return explicit


def run(data: bytes | str, *, decode: bool, compact: bool, pretty: bool) -> str:
    if decode:
        try:
            return codec.decode(data, pretty=pretty)
        except JsonStrError as exc:
            raise _fail(f"Error decoding JSON string: {exc}") from exc
    try:
        return codec.encode(data, compact=compact)
    except JsonStrError as exc:
        raise _fail(f"Error encoding JSON: {exc}") from exc


@app.command(epilog=_EXAMPLES)
def main(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(
        None, "--file", help="Input JSON file path."
    ),
    json_text: Optional[str] = typer.Option(
        None, "--json", help="JSON string input."
    ),
    compact: bool = typer.Option(
        False,
        "--compact/--no-compact",
        help="Remove newlines and extra spaces from pretty-printed JSON.",
    ),
    decode: bool = typer.Option(
        False, "--decode", help="Decode an escaped JSON string back to JSON."
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty/--no-pretty",
        help="Format the decoded JSON output with indentation (only used with --decode).",
    ),
    raw: bool = typer.Option(
        False,
        "--raw/--no-raw",
        help="Output without trailing newline (useful for piping).",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        exists=True,
        dir_okay=False,
        help="TOML file whose defaults table sets --compact, --pretty and --raw.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information.",
    ),
) -> None:
    """Convert JSON to escaped string format and vice versa."""
    flags = merge_flags(
        _explicit_flags(ctx, {"compact": compact, "pretty": pretty, "raw": raw}),
        flag_defaults(config_path=config),
    )
    data = _read_input(file, json_text, stdin=_stdin_stream())
    result = run(data, decode=decode, compact=flags["compact"], pretty=flags["pretty"])
    typer.echo(result, nl=not flags["raw"])
