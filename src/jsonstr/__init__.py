"""jsonstr package root."""

from jsonstr.codec import decode, encode
from jsonstr.exceptions import (
    DecodedContentNotJSON,
    InvalidEscapedString,
    InvalidJSON,
    JsonStrError,
    SerializationError,
)

__all__ = [
    "__version__",
    "DecodedContentNotJSON",
    "InvalidEscapedString",
    "InvalidJSON",
    "JsonStrError",
    "SerializationError",
    "decode",
    "encode",
]

__version__ = "1.0.0"
