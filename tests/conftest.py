from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def reputation_document_path() -> Path:
    return FIXTURES / "json.txt"


@pytest.fixture
def reputation_payload() -> dict:
    return {
        "user_id": 1,
        "post_id": 7457,
        "title": "Converting Unix timestamps with Json.NET",
        "positive_rep": 10,
        "on_date": 1316873139,
    }
