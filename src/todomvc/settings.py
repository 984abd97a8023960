from __future__ import annotations

import os
from dataclasses import dataclass

STORAGE_BACKENDS = ("browser", "sqlite", "json", "memory")

_DEFAULT_DB_URL = "sqlite:///storage/todomvc.db"
_DEFAULT_JSON_PATH = "storage/todomvc.json"
_DEFAULT_STORAGE_SECRET = "todomvc-dev-secret"
_DEFAULT_LOG_DIR = "data/logs"


@dataclass(frozen=True)
class Settings:
    storage: str = "browser"
    db_url: str = _DEFAULT_DB_URL
    json_path: str = _DEFAULT_JSON_PATH
    host: str = "0.0.0.0"
    port: int = 8000
    storage_secret: str = _DEFAULT_STORAGE_SECRET
    debug: bool = False
    log_dir: str = _DEFAULT_LOG_DIR

    def __post_init__(self) -> None:
        if self.storage not in STORAGE_BACKENDS:
            raise ValueError(
                f"Unknown TODOMVC_STORAGE {self.storage!r}, expected one of {', '.join(STORAGE_BACKENDS)}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        port_raw = (os.getenv("TODOMVC_PORT") or "8000").strip()
        try:
            port = int(port_raw)
        except ValueError as exc:
            raise ValueError(f"TODOMVC_PORT must be an integer, got {port_raw!r}") from exc
        return cls(
            storage=(os.getenv("TODOMVC_STORAGE") or "browser").strip().lower(),
            db_url=(os.getenv("TODOMVC_DB_URL") or _DEFAULT_DB_URL).strip(),
            json_path=(os.getenv("TODOMVC_JSON_PATH") or _DEFAULT_JSON_PATH).strip(),
            host=(os.getenv("TODOMVC_HOST") or "0.0.0.0").strip(),
            port=port,
            storage_secret=os.getenv("TODOMVC_STORAGE_SECRET") or _DEFAULT_STORAGE_SECRET,
            debug=os.getenv("TODOMVC_DEBUG") == "1",
            log_dir=(os.getenv("TODOMVC_LOG_DIR") or _DEFAULT_LOG_DIR).strip(),
        )
