import os

# Settings are read at import time, so the environment must be ready before
# any pos_backend module is collected.
os.environ.setdefault("TOKEN_SECRET_KEY", "test-secret-key-that-is-long-enough-0123456789")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("PASSWORD_PEPPER", "")
os.environ.setdefault("LOG_LEVEL", "WARNING")
