import os

# Settings are read at import time; point them at throwaway values first
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENV_FILE", os.devnull)
