import os

from .config import *  # noqa: F401,F403
from .config import db_config, env_flag

DB_CONFIG = db_config("wfh_status_test")

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")

ALLOW_RESET = env_flag("ALLOW_RESET", "1")
