"""Settings shared by every environment module."""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]


def env_flag(name: str, default: str) -> bool:
    return bool(int(os.getenv(name, default)))


def db_config(default_database: str = "wfh_status_db") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", ""),
        "database": os.getenv("DB_NAME", default_database),
    }


ROSTER_PATH = os.getenv("ROSTER_PATH", str(BASE_DIR / "data" / "users.json"))
HOLIDAYS_PATH = os.getenv("HOLIDAYS_PATH") or None

SEED_START = os.getenv("SEED_START", "2025-01-01")
SEED_END = os.getenv("SEED_END", "2025-03-31")
SEED_RANDOM_SEED = int(os.environ["SEED_RANDOM_SEED"]) if os.getenv("SEED_RANDOM_SEED") else None

STRICT_STATUS_VALIDATION = env_flag("STRICT_STATUS_VALIDATION", "1")
AUDIT_DEFAULT_LIMIT = int(os.getenv("AUDIT_DEFAULT_LIMIT", "100"))
