SECRET_KEY = "test-secret"

TIMEZONE = "Asia/Seoul"
EDIT_LOCK_HOUR = 9

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
