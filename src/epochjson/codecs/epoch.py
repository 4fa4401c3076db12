"""Seconds-since-epoch integer <-> datetime conversion."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from epochjson.errors import FormatError, RangeError, TypeMismatchError

EPOCH_ANCHOR = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ONE_SECOND = timedelta(seconds=1)


def _token_type(token: Any) -> str:
    if token is None:
        return "null"
    if isinstance(token, bool):
        return "boolean"
    if isinstance(token, str):
        return "string"
    if isinstance(token, float):
        return "float"
    if isinstance(token, dict):
        return "object"
    if isinstance(token, (list, tuple)):
        return "array"
    return type(token).__name__


@dataclass(frozen=True)
class EpochTimestampCodec:
    """Maps a JSON integer of whole seconds since 1970-01-01T00:00:00Z to a datetime.

    Decoded values are UTC-aware unless ``naive`` is set, in which case the
    tzinfo is dropped (the wall-clock time is still UTC). Naive values given
    to ``encode`` are read as UTC.
    """

    naive: bool = False

    def decode(self, token: Any) -> datetime:
        # bool is an int subclass but is its own JSON type
        if isinstance(token, bool) or not isinstance(token, int):
            raise FormatError(
                f"unexpected token type {_token_type(token)!r} when decoding a unix timestamp; expected integer",
                token=token,
            )
        if token < 0:
            raise RangeError(
                f"timestamp {token} precedes representable epoch", token=token
            )
        try:
            value = EPOCH_ANCHOR + timedelta(seconds=token)
        except OverflowError as exc:
            raise RangeError(
                f"timestamp {token} exceeds the representable date range", token=token
            ) from exc
        if self.naive:
            return value.replace(tzinfo=None)
        return value

    def encode(self, value: Any) -> int:
        if not isinstance(value, datetime):
            raise TypeMismatchError(
                f"expected datetime, got {type(value).__name__}", token=value
            )
        if value.tzinfo is None or value.utcoffset() is None:
            value = value.replace(tzinfo=timezone.utc)
        delta = value - EPOCH_ANCHOR
        if delta < timedelta(0):
            raise RangeError(
                f"date {value.isoformat()} precedes representable epoch", token=value
            )
        return delta // _ONE_SECOND
