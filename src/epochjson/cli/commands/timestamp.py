from __future__ import annotations

import json
from datetime import datetime

from epochjson.codecs.epoch import EpochTimestampCodec


def decode(*, seconds: str, naive: bool = False) -> None:
    """Decode a single JSON token given on the command line."""
    try:
        token = json.loads(seconds)
    except json.JSONDecodeError:
        # hand the raw text over so the codec reports it as a string token
        token = seconds
    print(EpochTimestampCodec(naive=naive).decode(token).isoformat())


def encode(*, value: str) -> None:
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        moment = datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"not an ISO 8601 date-time: {value!r}") from exc
    print(EpochTimestampCodec().encode(moment))
