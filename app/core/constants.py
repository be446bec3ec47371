"""Application constants.

This module contains magic strings and numbers used throughout the application.
Centralizing these values makes them easier to maintain and modify.
"""

# Attendance status values
# Only "Present" is ever stored; "Invited" is derived from a missing record.
STATUS_PRESENT = "Present"
STATUS_INVITED = "Invited"

# Shown in place of a check-in time for members that are still invited
TIME_PLACEHOLDER = "-"

# Check-in timestamps are stored as display strings in the configured timezone
CHECKIN_TIME_FORMAT = "%m/%d/%Y, %I:%M:%S %p"

# Member Token Configuration
# 16 random bytes, hex encoded (128 bits, 32 characters)
MEMBER_TOKEN_BYTES = 16
MEMBER_TOKEN_LENGTH = MEMBER_TOKEN_BYTES * 2

# Roster CSV columns (import)
ROSTER_IMPORT_FIELDS = ("id", "patient_name", "hospital_name", "major")

# Export headers
ROSTER_EXPORT_HEADER = ("ID", "Patient Name", "Hospital Name", "Major", "QR Code URL")
ATTENDANCE_EXPORT_HEADER = ("ID", "Patient Name", "Hospital Name", "Major", "Status", "Time")

# Path the QR codes point at. The frontend renders the scan view there, so a
# deploy needs FRONTEND_BUILD_PATH or a PUBLIC_BASE_URL serving the frontend
SCAN_PATH = "/scan"

# JWT Token Configuration
# Token expiration time in minutes (24 hours)
ACCESS_TOKEN_EXPIRE_MINUTES = 1440
