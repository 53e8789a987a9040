import os

from .config import *  # noqa: F401,F403
from .config import db_config, env_flag

DB_CONFIG = db_config()

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Seed demo statuses when the store is empty
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "1")

ALLOW_RESET = env_flag("ALLOW_RESET", "1")
