SECRET_KEY = "test-secret"

STORE_BACKEND = "memory"

DB_CONFIG = None

QRIS_IMAGE_PATH = None
QRIS_PAYLOAD = "TEST_QRIS_PAYLOAD"

CORS_ORIGIN = "*"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
