"""datashield: screen form field input for sensitive data before it leaves the page."""
from __future__ import annotations

from datashield.context import Context
from datashield.engine import Assessment, Category, Tier, evaluate
from datashield.policy import ShieldPolicy, load_policy
from datashield.screen import ScreenResult, screen

__version__ = "0.2.0"

__all__ = [
    "Assessment",
    "Category",
    "Context",
    "ScreenResult",
    "ShieldPolicy",
    "Tier",
    "evaluate",
    "load_policy",
    "screen",
]
