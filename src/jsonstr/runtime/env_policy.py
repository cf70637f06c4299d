from __future__ import annotations

import os
from pathlib import Path

CONFIG_ENV_KEY = "JSONSTR_CONFIG"


def env_text(name: str, *, default: str = "") -> str:
    return os.getenv(name, default).strip()


def config_path_from_env() -> Path | None:
    text = env_text(CONFIG_ENV_KEY)
    if not text:
        return None
    return Path(text)
