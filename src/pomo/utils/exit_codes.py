"""
Exit codes for pomo.

A finished session exits with SUCCESS; everything else maps to one of the
codes below so scripts wrapping pomo can tell failures apart.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error (non-positive blocks or durations)
ERROR_INVALID_ARGS = 2

# Session interrupted from the keyboard (128 + SIGINT)
ERROR_INTERRUPTED = 130


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_INTERRUPTED: "ERROR_INTERRUPTED",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Session finished",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_INTERRUPTED: "Session interrupted by the user",
    }
    return descriptions.get(code, "Unknown error")
