import os

SECRET_KEY = os.getenv("SECRET_KEY", "change-me")

SNAPSHOT_PATH = os.getenv("SNAPSHOT_PATH", "data/attendance_tracker.json")

DEBUG = bool(int(os.getenv("DEBUG", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")
