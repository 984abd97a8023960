from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

_LOADED = False


def load_env() -> None:
    global _LOADED
    if _LOADED:
        return
    _LOADED = True

    base_dir = Path(__file__).resolve().parent
    # Project root first so a checkout-level .env wins over the package one.
    candidates = [
        base_dir.parents[1] / ".env",
        base_dir / ".env",
    ]

    loaded_path: Path | None = None
    for path in candidates:
        if not path.exists():
            continue
        loaded_path = path
        # Real environment variables win over .env values.
        load_dotenv(dotenv_path=path, override=False)

    if os.getenv("TODOMVC_DEBUG") == "1" and loaded_path is not None:
        print(f"DEBUG: Environment loaded from {loaded_path}")


def reset_env_loaded() -> None:
    global _LOADED
    _LOADED = False
