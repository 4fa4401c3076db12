from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from epochjson.codecs.base import CODECS, FieldCodec, get_codec
from epochjson.utils.load import load_yaml_mapping

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class SerializerConfig(BaseModel):
    """Field-to-codec bindings and runtime options for record serialization."""

    version: int = Field(default=1)
    codecs: dict[str, str] = Field(
        default_factory=lambda: {"on_date": "unix-seconds"},
        description="Mapping of wire field name to codec name.",
    )
    naive: bool = Field(
        default=False,
        description="Decode timestamps to naive UTC datetimes instead of aware ones.",
    )
    log_level: str | None = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Use null to inherit CLI.",
    )

    @field_validator("codecs")
    @classmethod
    def _validate_codecs(cls, value: dict[str, str]) -> dict[str, str]:
        out: dict[str, str] = {}
        for field, name in value.items():
            field = str(field).strip()
            if not field:
                raise ValueError("codec bindings require a field name")
            codec = str(name).strip().lower()
            if codec not in CODECS:
                raise ValueError(
                    f"unknown codec {name!r} for field {field!r}; expected one of {', '.join(sorted(CODECS))}"
                )
            out[field] = codec
        return out

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        name = str(value).upper()
        if name not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {value!r}"
            )
        return name

    def build_codecs(self) -> dict[str, FieldCodec]:
        return {
            field: get_codec(name, naive=self.naive)
            for field, name in self.codecs.items()
        }


def load_serializer_config(path: Path | str | None) -> SerializerConfig:
    if path is None:
        return SerializerConfig()
    return SerializerConfig.model_validate(load_yaml_mapping(Path(path)))
