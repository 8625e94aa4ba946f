# src/datashield/policy/model.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from datashield.engine.types import Tier
from datashield.utils.stable import stable_hash

# Input types that never carry free text.
DEFAULT_EXCLUDED_FIELD_TYPES = ["submit", "button", "image", "file", "checkbox", "radio", "range", "color"]


class ShieldPolicy(BaseModel):
    """Screening policy handed to the field observer at construction time.

    Replaces ambient enable/trust flags: the observer reads everything it
    needs from here instead of from globals.
    """
    policy_id: str = Field("default", min_length=1)
    enabled: bool = True
    warn_tier: Tier = Field(Tier.MEDIUM, description="Lowest tier that produces a warning")
    excluded_field_types: List[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDED_FIELD_TYPES))

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True, frozen=True)

    @field_validator("warn_tier", mode="before")
    @classmethod
    def _parse_tier(cls, v):
        return Tier.parse(v)

    @field_validator("excluded_field_types", mode="before")
    @classmethod
    def _lower_types(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        return [str(t).strip().lower() for t in v if str(t).strip()]

    def excludes(self, field_type: str) -> bool:
        return (field_type or "").strip().lower() in self.excluded_field_types

    def fingerprint(self) -> str:
        payload = self.model_dump(mode="json")
        payload["warn_tier"] = self.warn_tier.name
        return stable_hash(payload)
