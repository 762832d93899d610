import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Unset DATA_SEED -> a fresh random data set per process
_seed = os.getenv("DATA_SEED")
DATA_SEED = int(_seed) if _seed else None
DATA_DAYS = int(os.getenv("DATA_DAYS", "30"))

DEFAULT_WINDOW_DAYS = int(os.getenv("DEFAULT_WINDOW_DAYS", "30"))
