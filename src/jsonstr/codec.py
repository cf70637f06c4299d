"""Escape JSON documents into string-literal content and back.

``encode`` turns a JSON document into the text that sits between the quotes
of a JSON string literal; ``decode`` reverses it and re-emits the document
compactly or indented. Both are pure and keep object key order.
"""

from __future__ import annotations

import json
import math
from typing import NoReturn

from jsonstr.exceptions import (
    DecodedContentNotJSON,
    InvalidEscapedString,
    InvalidJSON,
    JsonStrError,
    SerializationError,
)
from jsonstr.json_types import JSONValue

# Text from the command line arrives as str; files and stdin arrive as bytes.
InputData = bytes | bytearray | str

_QUOTE = '"'
_COMPACT_SEPARATORS = (",", ":")
_PRETTY_INDENT = 2


def encode(data: InputData, compact: bool = False) -> str:
    """Return ``data`` escaped as the interior of a JSON string literal.

    ``data`` must hold exactly one JSON value, as UTF-8 ``bytes`` or as an
    already decoded ``str``. With ``compact`` the value is reserialized
    without insignificant whitespace first; otherwise the original text is
    escaped verbatim, newlines and indentation included.

    Raises:
        InvalidJSON: ``data`` is not well-formed JSON.
        SerializationError: the value could not be written back out.
    """
    text = _as_text(data, error=InvalidJSON, label="invalid JSON")
    value = _parse_value(text, error=InvalidJSON, label="invalid JSON")
    if compact:
        text = _dump(value, pretty=False, label="error compacting JSON")
    try:
        literal = json.dumps(text, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError) as exc:
        _fail(SerializationError, "error encoding JSON", exc)
    _ensure_utf8(literal, label="error encoding JSON")
    return literal[1:-1]


def decode(data: InputData, pretty: bool = False) -> str:
    """Unescape string-literal content and return the JSON it carries.

    ``data`` is escaped text without its surrounding quotes, as produced by
    :func:`encode`, given as UTF-8 ``bytes`` or ``str``. With ``pretty`` the
    result is indented two spaces per level; otherwise it is compact.

    Raises:
        InvalidEscapedString: ``data`` is empty or not valid literal content.
        DecodedContentNotJSON: the unescaped text is not JSON.
        SerializationError: the value could not be written back out.
    """
    escaped = _as_text(data, error=InvalidEscapedString, label="invalid JSON string")
    if not escaped:
        raise InvalidEscapedString(
            "invalid JSON string: empty input", detail="empty input"
        )
    try:
        text = json.loads(_QUOTE + escaped + _QUOTE)
    except ValueError as exc:
        _fail(InvalidEscapedString, "invalid JSON string", exc)
    value = _parse_value(
        text,
        error=DecodedContentNotJSON,
        label="decoded string is not valid JSON",
    )
    if pretty:
        return _dump(value, pretty=True, label="error formatting JSON")
    return _dump(value, pretty=False, label="error marshaling JSON")


def _as_text(data: InputData, *, error: type[JsonStrError], label: str) -> str:
    if isinstance(data, str):
        return data
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError(
            f"expected bytes or str input, got {type(data).__name__}"
        )
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        _fail(error, label, exc)


def _parse_value(text: str, *, error: type[JsonStrError], label: str) -> JSONValue:
    try:
        return json.loads(
            text,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except (ValueError, RecursionError) as exc:
        _fail(error, label, exc)


def _dump(value: JSONValue, *, pretty: bool, label: str) -> str:
    try:
        if pretty:
            text = json.dumps(
                value, indent=_PRETTY_INDENT, ensure_ascii=False, allow_nan=False
            )
        else:
            text = json.dumps(
                value,
                separators=_COMPACT_SEPARATORS,
                ensure_ascii=False,
                allow_nan=False,
            )
    except (TypeError, ValueError, RecursionError) as exc:
        _fail(SerializationError, label, exc)
    _ensure_utf8(text, label=label)
    return text


def _ensure_utf8(text: str, *, label: str) -> None:
    # Lone surrogates from \udXXX escapes survive parsing but cannot be emitted.
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        _fail(SerializationError, label, exc)


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not a valid JSON value")


def _parse_finite_float(raw: str) -> float:
    value = float(raw)
    if math.isinf(value):
        raise ValueError(f"number {raw} is out of range")
    return value


def _fail(error: type[JsonStrError], label: str, exc: Exception) -> NoReturn:
    raise error(f"{label}: {exc}", detail=str(exc)) from exc
