"""
Calculator Constants
====================
Defaults, input bounds, prompt texts and report layout shared by the
model and the interactive menu.
"""


# ── Physical defaults ──────────────────────────────────────────────────────
DEFAULT_VELOCITY     = 0.0         # m/s
DEFAULT_ANGLE        = 0.0         # degrees
DEFAULT_GRAVITY      = 9.8         # m/s²  (Earth, rounded)

# ── Input bounds ───────────────────────────────────────────────────────────
MIN_ANGLE            = 0.0         # degrees (horizontal)
MAX_ANGLE            = 90.0        # degrees (vertical)

# ── Report layout ──────────────────────────────────────────────────────────
SEPARATOR_WIDTH      = 50          # characters
REPORT_PRECISION     = 2           # decimal places
SEPARATOR            = '=' * SEPARATOR_WIDTH

# ── Menu ───────────────────────────────────────────────────────────────────
MENU_TITLE = "      PROJECTILE MOTION CALCULATOR"
MENU_OPTIONS = (
    "1. Enter new values and calculate",
    "2. Display current results",
    f"3. Change gravity (default: {DEFAULT_GRAVITY} m/s²)",
    "4. Exit",
)
CHOICE_INPUT     = 1
CHOICE_DISPLAY   = 2
CHOICE_GRAVITY   = 3
CHOICE_EXIT      = 4

# ── Prompts ────────────────────────────────────────────────────────────────
PROMPT_CHOICE   = "Choose an option: "
PROMPT_VELOCITY = "Enter initial velocity (m/s): "
PROMPT_ANGLE    = f"Enter launch angle (degrees, {MIN_ANGLE:.0f}-{MAX_ANGLE:.0f}): "
PROMPT_GRAVITY  = "Enter gravity value (m/s²): "

# ── Messages ───────────────────────────────────────────────────────────────
MSG_WELCOME          = "\n*** Welcome to Projectile Motion Calculator ***"
MSG_FAREWELL         = "\nThank you for using Projectile Motion Calculator!"
MSG_INVALID_INPUT    = "\nInvalid input! Please enter a number."
MSG_INVALID_OPTION   = "\nInvalid option! Please choose 1-4."
MSG_NO_VALUES        = "\nNo values entered yet! Please use option 1 first."
MSG_NEGATIVE_VEL     = "Velocity cannot be negative! Using absolute value."
MSG_ANGLE_RANGE      = (f"Angle should be between {MIN_ANGLE:.0f} and "
                        f"{MAX_ANGLE:.0f} degrees!")
MSG_ANGLE_ADJUSTED   = "Adjusted to: {angle:.2f} degrees"
MSG_GRAVITY_INVALID  = f"Gravity must be positive! Using default {DEFAULT_GRAVITY} m/s²"
MSG_GRAVITY_UPDATED  = "Gravity updated to: {gravity:.2f} m/s²"
