import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

TIMEZONE = os.getenv("TIMEZONE", "Asia/Seoul")
EDIT_LOCK_HOUR = int(os.getenv("EDIT_LOCK_HOUR", "9"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
