"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_AUDIT_LIMIT = 100
MAX_AUDIT_LIMIT = 1000

# Seeding: share of weekday person-days that get an entry.
SEED_ENTRY_PROBABILITY = 0.8

SEED_LOCK_NAME = "wfh_tracker_seed"
SEED_LOCK_TIMEOUT_SECONDS = 10

SYSTEM_ACTOR = "system"
