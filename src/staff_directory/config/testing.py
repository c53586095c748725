SECRET_KEY = "test-secret"

SCRIPT_URL = "http://script.test/exec"
REQUEST_TIMEOUT = 5.0

FALLBACK_PHOTO_URL = "http://script.test/fallback.png"

DEBUG = False
TESTING = True
