from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import ConfigDict, field_validator

from mcp_core.common.exceptions import ConfigurationError
from mcp_core.common.logging_utils import LogFormat, configure_logging
from mcp_core.config import build_info
from mcp_core.config.build_info import BuildMode
from mcp_core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "MCP_CORE_LOG_LEVEL"
ENV_LOG_FORMAT = "MCP_CORE_LOG_FORMAT"

# Keys that must come from the build, not from files or the environment
_BUILD_ONLY_KEYS = frozenset({"build_mode"})


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _get_env_value(
    env: Mapping[str, str],
    name: str,
    default: Any,
) -> Any:
    """Return a stripped environment variable value or the default."""
    value = env.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


class CommandConfig(DomainModel):
    """Configuration shared by every command instance."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    log_level: LogLevel = LogLevel.INFO
    log_format: LogFormat = LogFormat.CONSOLE

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> Any:
        """Accept lower-case level names."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.lower()
        return v

    @property
    def build_mode(self) -> BuildMode:
        """The packaged build mode. Not settable per instance."""
        return build_info.BUILD_MODE

    @property
    def include_stack_traces(self) -> bool:
        """Whether fault payloads may carry stack traces."""
        return build_info.BUILD_MODE is BuildMode.DEBUG

    @property
    def log_level_value(self) -> int:
        return int(getattr(logging, self.log_level.value))

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> CommandConfig:
        """Create a CommandConfig from environment variables.

        The build mode is never read here; it always comes from
        :data:`mcp_core.config.build_info.BUILD_MODE`.
        """
        env: Mapping[str, str] = environ if environ is not None else os.environ
        return cls(
            log_level=_get_env_value(env, ENV_LOG_LEVEL, LogLevel.INFO),
            log_format=_get_env_value(env, ENV_LOG_FORMAT, LogFormat.CONSOLE),
        )


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> CommandConfig:
    """
    Load configuration from a YAML file and the environment.

    Environment variables take precedence over file values.

    Args:
        config_path: Optional path to a YAML configuration file
        environ: Optional environment mapping (defaults to ``os.environ``)

    Returns:
        CommandConfig instance

    Raises:
        ConfigurationError: If the file has an unsupported format or is invalid
    """
    env = environ if environ is not None else os.environ
    config_data: dict[str, Any] = {}

    if config_path:
        import yaml

        path = Path(config_path)
        if not path.exists():
            logger.warning(f"Configuration file not found: {config_path}")
        else:
            if path.suffix.lower() not in [".yaml", ".yml"]:
                raise ConfigurationError(
                    f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
                    details={"path": str(path)},
                )

            with open(path, encoding="utf-8") as f:
                try:
                    file_config = yaml.safe_load(f) or {}
                except yaml.YAMLError as exc:
                    raise ConfigurationError(
                        f"Invalid YAML in configuration file: {exc}",
                        details={"path": str(path)},
                    ) from exc

            if not isinstance(file_config, dict):
                raise ConfigurationError(
                    "Configuration file must contain a mapping at the top level.",
                    details={"path": str(path)},
                )

            for key in _BUILD_ONLY_KEYS & file_config.keys():
                logger.warning(f"Ignoring build-only setting '{key}' in {path}")
                file_config.pop(key)

            config_data.update(file_config)

    if ENV_LOG_LEVEL in env:
        config_data["log_level"] = _get_env_value(env, ENV_LOG_LEVEL, LogLevel.INFO)
    if ENV_LOG_FORMAT in env:
        config_data["log_format"] = _get_env_value(
            env, ENV_LOG_FORMAT, LogFormat.CONSOLE
        )

    try:
        return CommandConfig.model_validate(config_data)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


def configure_logging_from(config: CommandConfig, log_file: str | None = None) -> None:
    """Apply the logging settings of ``config`` to stdlib logging and structlog."""
    configure_logging(
        level=config.log_level_value,
        log_format=config.log_format,
        log_file=log_file,
    )
