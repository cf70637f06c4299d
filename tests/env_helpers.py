from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from jsonstr.runtime.env_policy import CONFIG_ENV_KEY


@contextmanager
def config_env(path: Path | str | None) -> Iterator[None]:
    """Point ``JSONSTR_CONFIG`` at ``path`` (or unset it) for the block."""
    previous = os.environ.get(CONFIG_ENV_KEY)
    if path is None:
        os.environ.pop(CONFIG_ENV_KEY, None)
    else:
        os.environ[CONFIG_ENV_KEY] = str(path)
    try:
        yield
    finally:
        if previous is None:
            os.environ.pop(CONFIG_ENV_KEY, None)
        else:
            os.environ[CONFIG_ENV_KEY] = previous
