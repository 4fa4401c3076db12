import json
from datetime import datetime, timezone

import pytest
from pydantic import BaseModel, ValidationError

from epochjson.codecs import EpochTimestampCodec
from epochjson.domain.reputation import ReputationChange
from epochjson.errors import FormatError, RangeError
from epochjson.io.serializers import RecordSerializer, reputation_serializer

ON_DATE = datetime(2011, 9, 24, 14, 5, 39, tzinfo=timezone.utc)


def test_loads_decodes_bound_field(reputation_payload):
    serializer = reputation_serializer()

    record = serializer.loads(json.dumps(reputation_payload))

    assert record.on_date == ON_DATE
    assert record.user_id == 1
    assert record.post_id == 7457
    assert record.positive_reputation == 10
    assert record.title.startswith("Converting")


def test_dumps_writes_bare_integer(reputation_payload):
    serializer = reputation_serializer()
    record = serializer.from_document(reputation_payload)

    text = serializer.dumps(record)

    assert '"on_date": 1316873139' in text
    assert json.loads(text) == reputation_payload


def test_to_document_uses_wire_names():
    record = ReputationChange(
        user_id=3,
        post_id=4,
        title="t",
        positive_reputation=5,
        on_date=ON_DATE,
    )

    doc = reputation_serializer().to_document(record)

    assert doc == {
        "user_id": 3,
        "post_id": 4,
        "title": "t",
        "positive_rep": 5,
        "on_date": 1316873139,
    }


def test_decode_error_names_the_field(reputation_payload):
    payload = dict(reputation_payload, on_date="1316873139")

    with pytest.raises(FormatError) as excinfo:
        reputation_serializer().from_document(payload)

    assert excinfo.value.field == "on_date"
    assert str(excinfo.value).startswith("on_date: ")


def test_encode_error_propagates_without_partial_document():
    record = ReputationChange(
        user_id=1,
        post_id=1,
        title="old",
        positive_reputation=1,
        on_date=datetime(1969, 12, 31, 23, 59, 59, tzinfo=timezone.utc),
    )

    with pytest.raises(RangeError) as excinfo:
        reputation_serializer().dumps(record)

    assert excinfo.value.field == "on_date"


def test_missing_bound_field_is_reported_by_the_model(reputation_payload):
    payload = {k: v for k, v in reputation_payload.items() if k != "on_date"}

    with pytest.raises(ValidationError):
        reputation_serializer().from_document(payload)


def test_loads_rejects_non_object_documents():
    with pytest.raises(ValueError, match="Expected a JSON object"):
        reputation_serializer().loads("[1316873139]")


def test_naive_serializer_round_trips(reputation_payload):
    serializer = reputation_serializer(naive=True)

    record = serializer.from_document(reputation_payload)

    assert record.on_date.tzinfo is None
    assert serializer.to_document(record)["on_date"] == 1316873139


def test_unknown_binding_is_rejected():
    with pytest.raises(ValueError, match="no field"):
        RecordSerializer(ReputationChange, {"created": EpochTimestampCodec()})


def test_bindings_apply_to_any_model():
    class Event(BaseModel):
        name: str
        started: datetime
        finished: datetime

    serializer = RecordSerializer(
        Event,
        {"started": EpochTimestampCodec(), "finished": EpochTimestampCodec()},
    )

    event = serializer.loads('{"name": "build", "started": 0, "finished": 60}')

    assert (event.finished - event.started).total_seconds() == 60
    assert serializer.to_document(event) == {"name": "build", "started": 0, "finished": 60}
