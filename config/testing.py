SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

DATA_SEED = 42
DATA_DAYS = 30

DEFAULT_WINDOW_DAYS = 30
