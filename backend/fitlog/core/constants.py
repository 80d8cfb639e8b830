"""Shared application constants.

Centralizes repeat values used across logging, reporting and reminder
logic so we can document and adjust them in one place.
"""

# 24h wall-clock time, e.g. 07:30 or 23:05
HHMM_PATTERN = r"^([01][0-9]|2[0-3]):[0-5][0-9]$"

WORKOUT_TYPES = ["Push", "Pull", "Legs", "Full Body", "Swimming", "Cardio", "Rest"]

# CSV export, column order is fixed
CSV_HEADER = [
    "Date",
    "Weight (kg)",
    "Steps",
    "Calories",
    "Water (L)",
    "Workout",
    "Workout Type",
    "Wake Time",
    "Sleep Time",
    "Notes",
]
REPORT_FILENAME = "fitness-report-{start}-to-{end}.csv"

# Food catalog search cap
FOOD_SEARCH_LIMIT = 50

# Accepted photo upload extensions
PHOTO_EXTENSIONS = [".jpg", ".jpeg", ".png", ".gif", ".webp", ".heic"]

# Push payload defaults
PUSH_ICON = "/pwa-192x192.png"

# Push endpoints answering with these statuses are gone for good
GONE_STATUS_CODES = (404, 410)
