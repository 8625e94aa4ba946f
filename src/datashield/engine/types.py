from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Tier(int, Enum):
    IGNORE = 0
    LOW = 1      # soft hint
    MEDIUM = 2   # contextual warning
    HIGH = 3     # strong warning

    @classmethod
    def parse(cls, raw: Any, default: Optional["Tier"] = None) -> "Tier":
        """Accept a Tier, its name (any case) or its rank."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            key = raw.strip().upper()
            if key in cls.__members__:
                return cls[key]
        elif isinstance(raw, int) and not isinstance(raw, bool):
            try:
                return cls(raw)
            except ValueError:
                pass
        if default is not None:
            return default
        raise ValueError(f"Unknown tier: {raw!r}. Expected one of {', '.join(cls.__members__)}")


class Category(str, Enum):
    CREDIT_CARD = "Credit Card"
    NATIONAL_ID = "Aadhaar Number"
    SECRET = "API Key / Token"
    TAX_ID = "PAN Number"
    PAYMENT_HANDLE = "UPI ID"
    EMAIL = "Email Address"
    PHONE = "Phone Number"
    CVV = "CVV/CVC"
    PASSWORD = "Password"
    GENERIC = "Sensitive Data"


@dataclass(frozen=True)
class Assessment:
    score: int
    tier: Tier
    category: str = ""
    reasons: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def reason(self) -> str:
        return ", ".join(self.reasons)

    def is_at_least(self, tier: Tier) -> bool:
        return self.tier >= tier

    def to_payload(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "tier": self.tier.name,
            "category": self.category,
            "reasons": list(self.reasons),
        }


IGNORED = Assessment(score=0, tier=Tier.IGNORE)
