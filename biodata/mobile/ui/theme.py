"""
Biodata Form Theme - Centralized color palette and spacing.

The screen is a plain Material 3 form: one seed color, the scheme's error
color for inline messages, and a muted tone for secondary text.
"""

# =============================================================================
# PRIMARY COLORS
# =============================================================================
PRIMARY = "#6750A4"            # Seed color, button fill
ERROR = "#B3261E"              # Inline validation messages
SUCCESS = "#386A20"            # Status text after a passing submit

# =============================================================================
# TEXT COLORS
# =============================================================================
TEXT_STRONG = "#1C1B1F"        # Full name label
TEXT_MUTED = "#79747E"         # Status line, hints

# =============================================================================
# LOG LEVEL COLORS
# =============================================================================
LOG_INFO = PRIMARY
LOG_SUCCESS = SUCCESS
LOG_WARNING = "#7D5700"
LOG_ERROR = ERROR

# =============================================================================
# SPACING (dp)
# =============================================================================
SPACE_FIELD = 8                # Between text fields
SPACE_BUTTON = 16              # Above the submit button
SPACE_RESULT = 24              # Above the full name label

# =============================================================================
# COPY
# =============================================================================
LABEL_FIRST_NAME = "Nama Depan"
LABEL_LAST_NAME = "Nama Belakang"
LABEL_EMAIL = "Email"
LABEL_SUBMIT = "Submit"
FULL_NAME_PREFIX = "Nama Lengkap: "


def get_log_color(level: str) -> str:
    """Get the color for a log level."""
    colors = {
        "INFO": LOG_INFO,
        "SUCCESS": LOG_SUCCESS,
        "WARNING": LOG_WARNING,
        "ERROR": LOG_ERROR,
    }
    return colors.get(level.upper(), TEXT_MUTED)
