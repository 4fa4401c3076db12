from __future__ import annotations

import json
import logging
from typing import Any, Generic, Mapping, TypeVar

from pydantic import BaseModel

from epochjson.codecs.base import FieldCodec
from epochjson.codecs.epoch import EpochTimestampCodec
from epochjson.domain.reputation import ReputationChange
from epochjson.errors import CodecError
from epochjson.io.documents import parse_document

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class RecordSerializer(Generic[RecordT]):
    """Encodes and decodes records, routing bound fields through their codecs.

    ``codecs`` maps the field's wire name (its alias, when the model declares
    one) to the codec that owns it. Fields without a binding are left to the
    model.
    """

    def __init__(self, record_type: type[RecordT], codecs: Mapping[str, FieldCodec]) -> None:
        known = _wire_names(record_type)
        unknown = sorted(set(codecs) - known)
        if unknown:
            raise ValueError(
                f"{record_type.__name__} has no field(s) named {', '.join(unknown)}"
            )
        self._record_type = record_type
        self._codecs = dict(codecs)

    @property
    def record_type(self) -> type[RecordT]:
        return self._record_type

    @property
    def codecs(self) -> dict[str, FieldCodec]:
        return dict(self._codecs)

    def to_document(self, record: RecordT) -> dict[str, Any]:
        doc = record.model_dump(by_alias=True)
        for name, codec in self._codecs.items():
            doc[name] = self._apply(name, codec.encode, doc[name])
        return doc

    def dumps(self, record: RecordT, *, indent: int | None = None) -> str:
        return json.dumps(self.to_document(record), ensure_ascii=False, indent=indent)

    def from_document(self, data: Mapping[str, Any]) -> RecordT:
        doc = dict(data)
        for name, codec in self._codecs.items():
            if name in doc:
                doc[name] = self._apply(name, codec.decode, doc[name])
        return self._record_type.model_validate(doc)

    def loads(self, text: str) -> RecordT:
        return self.from_document(parse_document(text))

    def _apply(self, name: str, convert, value: Any) -> Any:
        try:
            return convert(value)
        except CodecError as exc:
            exc.field = name
            logger.debug(
                "%s.%s: %s error on %r", self._record_type.__name__, name, exc.kind.value, value
            )
            raise


def _wire_names(record_type: type[BaseModel]) -> set[str]:
    return {info.alias or name for name, info in record_type.model_fields.items()}


def reputation_serializer(*, naive: bool = False) -> RecordSerializer[ReputationChange]:
    return RecordSerializer(
        ReputationChange, {"on_date": EpochTimestampCodec(naive=naive)}
    )
