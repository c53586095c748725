"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

INCREMENT_APPROVAL_YEARS = 1
INCREMENT_APPROVAL_DAYS = 365
JOINING_APPROVAL_MONTHS = 6
JOINING_APPROVAL_DAYS = 182

MIN_PASSWORD_LENGTH = 6
DEFAULT_REQUEST_TIMEOUT = 30

DENIED_MESSAGE = "You do not have permission to perform this action."
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."

# Spreadsheet headers
FULL_NAME = "Full Name"
DESIGNATION = "Designation"
JOINING_DATE = "Joining Date"
INCREMENT_DATE = "Increment Date"
PHOTO_URL = "Photo URL"
