import os

from config.config import LOG_LEVEL, MAX_BOARDS, RECORDS_DEFAULT_DAYS, SESSION_DAYS, db_config, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config()

DEBUG = False

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
