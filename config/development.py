import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Single JSON snapshot holding every term and the holiday list
SNAPSHOT_PATH = os.getenv("SNAPSHOT_PATH", "data/attendance_tracker.json")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")
