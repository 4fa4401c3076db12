from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReputationChange(BaseModel):
    """A single reputation change on a post."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: int
    post_id: int
    title: str
    positive_reputation: int = Field(alias="positive_rep")
    on_date: datetime
