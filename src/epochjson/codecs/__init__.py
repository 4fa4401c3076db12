from epochjson.codecs.base import CODECS, FieldCodec, get_codec
from epochjson.codecs.epoch import EPOCH_ANCHOR, EpochTimestampCodec

__all__ = [
    "CODECS",
    "EPOCH_ANCHOR",
    "EpochTimestampCodec",
    "FieldCodec",
    "get_codec",
]
