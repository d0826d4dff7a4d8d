import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# External HR REST API consumed by the console
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000/api")
API_TOKEN = os.getenv("API_TOKEN", "")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "15"))

DEFAULT_TARGET_DAYS = int(os.getenv("DEFAULT_TARGET_DAYS", "180"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
