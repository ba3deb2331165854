import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Seed the demo students and classes on startup
LOAD_SAMPLE_DATA = bool(int(os.getenv("LOAD_SAMPLE_DATA", "1")))
