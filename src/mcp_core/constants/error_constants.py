"""Constants for error messages.

This module contains the fixed texts used when validation fails or an
execution fault is mapped to a response.
"""

TROUBLESHOOTING_URL = "https://aka.ms/azmcp/troubleshooting"

# Validation
MISSING_REQUIRED_OPTIONS_PREFIX = "Missing Required options: "

# Fault mapping
TROUBLESHOOTING_GUIDANCE = (
    ". To mitigate this issue, please refer to the troubleshooting guidelines "
    f"here at {TROUBLESHOOTING_URL}."
)

# Parsing
COMMAND_PARSING_ERROR = "Error parsing command {command}: {error}"
UNRECOGNIZED_ARGUMENTS_ERROR = "Unrecognized arguments: {arguments}"

__all__ = [
    "COMMAND_PARSING_ERROR",
    "MISSING_REQUIRED_OPTIONS_PREFIX",
    "TROUBLESHOOTING_GUIDANCE",
    "TROUBLESHOOTING_URL",
    "UNRECOGNIZED_ARGUMENTS_ERROR",
]
