from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

logger = logging.getLogger(__name__)


def parse_document(text: str) -> dict[str, Any]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON document: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError(
            f"Expected a JSON object, got {type(payload).__name__}")
    return payload


def read_document_text(path: Path) -> str:
    try:
        with path.open("r", encoding="utf-8") as fh:
            text = fh.read()
    except FileNotFoundError as e:
        raise FileNotFoundError(f"JSON document not found: {path}") from e
    logger.info("read %d bytes from %s", len(text), path)
    return text


def write_document(path: Path, payload: Mapping[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2)
    logger.info("wrote %s", path)
