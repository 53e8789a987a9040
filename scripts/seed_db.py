"""Seed demo statuses into an empty store (or wipe and reseed with --reset)."""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.wfh_tracker.wfh_tracker.common.datetime_utils import parse_iso_date
from src.wfh_tracker.wfh_tracker.container import build_container


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--reset", action="store_true", help="delete all statuses and audit logs first")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        roster_path=settings.ROSTER_PATH,
        seed_start=parse_iso_date(settings.SEED_START),
        seed_end=parse_iso_date(settings.SEED_END),
        seed_random_seed=settings.SEED_RANDOM_SEED,
    )
    try:
        inserted = container.seed_service.reset() if args.reset else container.seed_service.seed_if_empty()
    finally:
        container.close()
    print(f"OK: Seeded {inserted} status entries")


if __name__ == "__main__":
    main()
