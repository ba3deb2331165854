import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOAD_SAMPLE_DATA = bool(int(os.getenv("LOAD_SAMPLE_DATA", "0")))
