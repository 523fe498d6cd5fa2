"""Test package. Settings are read at import time, so the environment is prepared here first."""

import os

os.environ.setdefault("JWT_SECRET", "unit-test-secret-key-0123456789abcdef")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("LOG_LEVEL", "WARNING")
