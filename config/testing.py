import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "presensi_test"),
}

API_BASE_URL = "http://testserver"
FORM_BASE_URL = "http://form.test"

DEBOUNCE_SECONDS = 0.01
HTTP_TIMEOUT_SECONDS = 2.0

MAX_CONTENT_LENGTH = 5 * 1024 * 1024

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
