import os
import tempfile

SECRET_KEY = "test-secret"

SNAPSHOT_PATH = os.getenv("SNAPSHOT_PATH", os.path.join(tempfile.gettempdir(), "attendance_tracker_test.json"))

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
LOG_FORMAT = "text"
