from config.config import MAX_BOARDS, RECORDS_DEFAULT_DAYS, SESSION_DAYS, db_config

SECRET_KEY = "test-secret"

DB_CONFIG = db_config(default_password="")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
