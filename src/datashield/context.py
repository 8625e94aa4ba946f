from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Attribute keys accepted by Context.from_mapping, in haystack order.
_HAYSTACK_KEYS = (
    ("name",),
    ("id",),
    ("class", "className", "class_name"),
    ("placeholder",),
    ("aria-label", "aria_label", "ariaLabel"),
)

_INSECURE_WORDS = {"0", "false", "no", "off", "http", "http:"}


def _text(v: Any) -> str:
    if v is None:
        return ""
    if isinstance(v, (list, tuple)):
        return " ".join(_text(x) for x in v)
    return str(v)


class Context(BaseModel):
    """Ambient metadata about the field being screened.

    Built by the field observer; the evaluator only reads it. Missing
    attributes are empty strings, and an unknown transport is treated as
    secure so no insecure-page boost is applied by accident.
    """
    haystack: str = Field("", description="Lowercased name/id/class/placeholder/aria-label")
    field_type: str = Field("", description="Input type, e.g. 'password', 'text', 'email'")
    secure: bool = Field(True, description="Page served over HTTPS")

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("haystack", mode="before")
    @classmethod
    def _fold(cls, v: Any) -> str:
        return _text(v).lower()

    @field_validator("field_type", mode="before")
    @classmethod
    def _fold_type(cls, v: Any) -> str:
        return _text(v).strip().lower()

    @field_validator("secure", mode="before")
    @classmethod
    def _coerce_secure(cls, v: Any) -> bool:
        if v is None:
            return True
        if isinstance(v, bool):
            return v
        if isinstance(v, (int, float)):
            return bool(v)
        if isinstance(v, str):
            return v.strip().lower() not in _INSECURE_WORDS
        return True

    @classmethod
    def from_field(
        cls,
        *,
        name: Optional[str] = None,
        id: Optional[str] = None,
        class_name: Any = None,
        placeholder: Optional[str] = None,
        aria_label: Optional[str] = None,
        field_type: Optional[str] = None,
        secure: Optional[bool] = True,
    ) -> "Context":
        parts = [name, id, class_name, placeholder, aria_label]
        return cls(
            haystack=" ".join(_text(p) for p in parts),
            field_type=field_type or "",
            secure=secure,
        )

    @classmethod
    def from_mapping(cls, attrs: Optional[Mapping[str, Any]]) -> "Context":
        """Build from a DOM-style attribute dict; unknown keys are ignored."""
        if not isinstance(attrs, Mapping):
            return cls()
        parts = []
        for aliases in _HAYSTACK_KEYS:
            value = next((attrs[k] for k in aliases if attrs.get(k) is not None), None)
            parts.append(_text(value))
        return cls(
            haystack=" ".join(parts),
            field_type=_text(attrs.get("type")),
            secure=attrs.get("secure", True),
        )

    def mentions(self, *keywords: str) -> bool:
        return any(k in self.haystack for k in keywords)

    @property
    def is_password(self) -> bool:
        return self.field_type == "password"


EMPTY_CONTEXT = Context()
