SECRET_KEY = "test-secret"

API_BASE_URL = "http://api.test/api"
API_TOKEN = "test-token"
API_TIMEOUT = 5.0

DEFAULT_TARGET_DAYS = 180

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
