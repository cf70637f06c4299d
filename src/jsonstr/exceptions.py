"""Error kinds raised by the jsonstr codec."""

from __future__ import annotations


class JsonStrError(ValueError):
    """Base class for every failure the encoder or decoder reports.

    ``kind`` is a stable machine-readable tag; the message is meant for
    humans and carries the underlying parser diagnostic.
    """

    kind = "jsonstr"

    def __init__(self, message: str, *, detail: str = "") -> None:
        super().__init__(message)
        self.detail = detail


class InvalidJSON(JsonStrError):
    """Encoder input is not a well-formed JSON value."""

    kind = "invalid_json"


class SerializationError(JsonStrError):
    """A parsed value could not be written back out."""

    kind = "serialization"


class InvalidEscapedString(JsonStrError):
    """Decoder input, once quoted, is not a valid JSON string literal."""

    kind = "invalid_escaped_string"


class DecodedContentNotJSON(JsonStrError):
    """The unescaped text is not itself a JSON value."""

    kind = "decoded_content_not_json"
