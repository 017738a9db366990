import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# 'mysql' or 'memory' (memory keeps data only while the process runs)
STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "parking_db"),
}

# QRIS shown on the payment view: a static image file, or a payload rendered as QR
QRIS_IMAGE_PATH = os.getenv("QRIS_IMAGE_PATH")
QRIS_PAYLOAD = os.getenv("QRIS_PAYLOAD", "PARKING_PAYMENT")

CORS_ORIGIN = os.getenv("CORS_ORIGIN", "*")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
