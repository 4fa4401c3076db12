from __future__ import annotations

import logging
from pathlib import Path

from epochjson.config.serializer import SerializerConfig
from epochjson.domain.reputation import ReputationChange
from epochjson.io.documents import read_document_text, write_document
from epochjson.io.serializers import RecordSerializer

logger = logging.getLogger(__name__)


def handle(*, path: str, config: SerializerConfig, out: str | None = None) -> None:
    """Print a document, its decoded date, and the document re-encoded."""
    text = read_document_text(Path(path))
    print(text.rstrip("\n"))
    print()

    serializer = RecordSerializer(ReputationChange, config.build_codecs())
    reputation = serializer.loads(text)
    logger.debug("decoded %r", reputation)
    print(reputation.on_date.isoformat())
    print()

    print(serializer.dumps(reputation))
    if out is not None:
        write_document(Path(out), serializer.to_document(reputation))
