"""
Build-time settings.

``BUILD_MODE`` is fixed when the package is built and is the only source of
the debug/release switch. It is never read from the environment or from
configuration files.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class BuildMode(str, Enum):
    """Build flavours of the package."""

    DEBUG = "debug"
    RELEASE = "release"


BUILD_MODE: Final[BuildMode] = BuildMode.RELEASE
