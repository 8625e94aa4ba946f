from __future__ import annotations

import os


def env(key: str, default: str = "") -> str:
    return os.getenv(key, default)


class Settings:
    POLICY_PATH = env("DATASHIELD_POLICY_PATH", "")
    WARN_TIER = env("DATASHIELD_WARN_TIER", "MEDIUM").upper()  # LOW|MEDIUM|HIGH
    LOG_LEVEL = env("DATASHIELD_LOG_LEVEL", "WARNING").upper()
