import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Seeded so the demo data set is the same on every restart
DATA_SEED = int(os.getenv("DATA_SEED", "2024"))
DATA_DAYS = int(os.getenv("DATA_DAYS", "30"))

DEFAULT_WINDOW_DAYS = int(os.getenv("DEFAULT_WINDOW_DAYS", "30"))
