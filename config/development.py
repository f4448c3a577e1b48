import os

from config.config import LOG_LEVEL, MAX_BOARDS, RECORDS_DEFAULT_DAYS, SESSION_DAYS, db_config, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config(default_password="")

DEBUG = True

# If enabled, the app applies database/schema.sql on startup (CREATE IF NOT EXISTS).
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Optional: also seed the demo teacher and class on startup
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
