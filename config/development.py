import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "presensi_db"),
}

# Base URL of this API, used by HTTP wizard sessions
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000")
# Public URL of the check-in form; activity QR codes point at FORM_BASE_URL/?activityId=<id>
FORM_BASE_URL = os.getenv("FORM_BASE_URL", "http://localhost:3000")

DEBOUNCE_SECONDS = float(os.getenv("DEBOUNCE_SECONDS", "0.5"))
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

# Signatures arrive as base64 data URLs
MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(50 * 1024 * 1024)))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
