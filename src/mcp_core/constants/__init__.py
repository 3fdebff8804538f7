"""Constants module for the command core.

This module contains the status codes and fixed message texts shared by the
command contract, the runner and the tests.
"""

# We are using wildcard imports here to make all constants easily accessible
# from a single import point.
from .error_constants import *  # noqa: F403
from .status_constants import *  # noqa: F403
