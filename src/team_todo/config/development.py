import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

TIMEZONE = os.getenv("TIMEZONE", "Asia/Seoul")
EDIT_LOCK_HOUR = int(os.getenv("EDIT_LOCK_HOUR", "9"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
