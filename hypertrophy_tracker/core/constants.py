"""Application constants."""

# Plan shape
PLAN_DAY_COUNT = 5
VACATION_PLAN_DAY_COUNT = 14

# Session history page size (GET /progress/sessions)
DEFAULT_SESSION_LIST_LIMIT = 10
MAX_SESSION_LIST_LIMIT = 100

# Set logging bounds
MAX_SET_NUMBER = 20
MAX_REPS = 200
MAX_WEIGHT_KG = 1000
MIN_RPE = 1
MAX_RPE = 10

# Offline sync batch size (one buffered session)
MAX_SYNC_LOGS = 500

# Reminder poll cadence (seconds), matches minute-level HH:MM reminder times
REMINDER_POLL_SECONDS = 60

# CSV export
CSV_EXPORT_HEADER = ("Date", "Workout Day", "Exercise", "Set", "Reps", "Weight (kg)", "RIR", "RPE")
UTF8_BOM = "\ufeff"
