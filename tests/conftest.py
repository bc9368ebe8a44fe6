"""
Pytest configuration: point the app at an in-memory SQLite database with cheap
bcrypt hashing before any vehicle_api module reads its settings.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "dev"
os.environ["SEED_DATA"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET"] = "test-secret-key-with-enough-length-for-hs256"
os.environ.setdefault("LOG_LEVEL", "WARNING")
