import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Deployed Apps Script web app that fronts the staff spreadsheet
SCRIPT_URL = os.getenv("SCRIPT_URL", "http://localhost:8081/exec")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))

FALLBACK_PHOTO_URL = os.getenv(
    "FALLBACK_PHOTO_URL",
    "https://drive.google.com/uc?export=download&id=1iUQhelba6oMDa5Lb3EuZL_B4_MS4plzC",
)

DEBUG = True
