"""Constants for response status codes.

Command responses reuse HTTP status semantics so that transports can map them
without translation.
"""

# 2xx Success
SUCCESS_STATUS_CODE = 200
SUCCESS_MESSAGE = "Success"

# 4xx Client Errors
VALIDATION_ERROR_STATUS_CODE = 400
UNAUTHORIZED_STATUS_CODE = 401
NOT_FOUND_STATUS_CODE = 404

# 5xx Server Errors
DEFAULT_FAULT_STATUS_CODE = 500
SERVICE_UNAVAILABLE_STATUS_CODE = 503

__all__ = [
    "DEFAULT_FAULT_STATUS_CODE",
    "NOT_FOUND_STATUS_CODE",
    "SERVICE_UNAVAILABLE_STATUS_CODE",
    "SUCCESS_MESSAGE",
    "SUCCESS_STATUS_CODE",
    "UNAUTHORIZED_STATUS_CODE",
    "VALIDATION_ERROR_STATUS_CODE",
]
