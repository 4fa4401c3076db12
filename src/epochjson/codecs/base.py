from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

from epochjson.codecs.epoch import EpochTimestampCodec


@runtime_checkable
class FieldCodec(Protocol):
    """Converts one record field between its Python value and a JSON token."""

    def decode(self, token: Any) -> Any: ...

    def encode(self, value: Any) -> Any: ...


CODECS: dict[str, Callable[..., FieldCodec]] = {
    "unix-seconds": EpochTimestampCodec,
}


def get_codec(name: str, **options: Any) -> FieldCodec:
    try:
        factory = CODECS[name]
    except KeyError:
        available = ", ".join(sorted(CODECS))
        raise ValueError(f"Unknown codec '{name}'. Available: {available}") from None
    return factory(**options)
