"""Inbound scoring event payload."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class HitRequest(BaseModel):
    """Body of ``POST /hit``.

    Absent or ``null`` fields fall back to empty values so the field checks in
    the ingest service decide the error message; wrong JSON types and shots
    outside the 64-bit range are rejected outright.
    """

    model_config = ConfigDict(populate_by_name=True)

    roll_number: StrictStr = Field(default="", alias="rollNumber")
    name: StrictStr = ""
    shot: StrictInt = Field(default=0, ge=INT64_MIN, le=INT64_MAX)

    @field_validator("roll_number", "name", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("shot", mode="before")
    @classmethod
    def _null_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


__all__ = ["HitRequest"]
