"""Unix epoch timestamp codec for JSON records."""

from epochjson.codecs import EPOCH_ANCHOR, EpochTimestampCodec, FieldCodec, get_codec
from epochjson.errors import (
    CodecError,
    ErrorKind,
    FormatError,
    RangeError,
    TypeMismatchError,
)
from epochjson.io.serializers import RecordSerializer, reputation_serializer

__all__ = [
    "EPOCH_ANCHOR",
    "EpochTimestampCodec",
    "FieldCodec",
    "get_codec",
    "CodecError",
    "ErrorKind",
    "FormatError",
    "RangeError",
    "TypeMismatchError",
    "RecordSerializer",
    "reputation_serializer",
]
