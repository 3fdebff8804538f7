from mcp_core.config.app_config import (
    CommandConfig,
    LogLevel,
    configure_logging_from,
    load_config,
)
from mcp_core.config.build_info import BUILD_MODE, BuildMode

__all__ = [
    "BUILD_MODE",
    "BuildMode",
    "CommandConfig",
    "LogLevel",
    "configure_logging_from",
    "load_config",
]
