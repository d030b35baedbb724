"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ACADEMIC_YEARS = (
    "First Year",
    "Second Year",
    "Third Year",
    "Fourth Year",
)

# Subject catalogue offered in the faculty session form. Years without an
# entry have no subjects to pick from.
YEAR_SUBJECTS = {
    "Third Year": (
        "Compiler Design",
        "Computer Network",
        "Development Engineering",
        "Machine Learning",
        "GIS",
    ),
}

DEFAULT_HOD_YEAR = "Third Year"

SESSION_HISTORY_LIMITS = (15, 30)
DEFAULT_SESSION_HISTORY_LIMIT = 15

PRN_LENGTH = 13

CURRENT_USER_KEY = "qr_user"
PENDING_SESSIONS_KEY = "pending_sessions"
# Pending sessions live in the session cookie, which browsers cap at ~4KB.
MAX_PENDING_SESSIONS = 10

REPORT_FILENAME = "attendance_report.csv"
