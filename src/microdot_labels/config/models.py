"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from microdot_labels.config.constants import DEFAULT_FORMAT, OUTPUT_FORMATS


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_format: str = Field(
        default=DEFAULT_FORMAT, description="Output format used when --format is omitted",
    )

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format '{v}' (expected one of: {', '.join(OUTPUT_FORMATS)})"
            )
        return v
