# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file
#   and provide typed config objects to the rest of the package.
#
# CLASSES:
# --------
# - IdentityConfig (dataclass)
#     id_field: str              (default "id")
#     build_main_index: bool     (default True)
#
# - LoggingConfig (dataclass)
#     level: str | None          (default None = leave logging alone)
#     log_file: str | None       (default None)
#
# - AppConfig (dataclass)
#     identity: IdentityConfig
#     logging: LoggingConfig
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#     The first load also applies the logging settings (see
#     logging_config.configure_logging) when a level or log file is set.
#
# - reset_config() -> None
#     Forget the singleton so the next get_config() re-reads the environment.
#
# ENVIRONMENT:
# ------------
#   CLASSLIST_ID_FIELD           → IdentityConfig.id_field
#   CLASSLIST_BUILD_MAIN_INDEX   → IdentityConfig.build_main_index
#   CLASSLIST_LOG_LEVEL          → LoggingConfig.level
#   CLASSLIST_LOG_FILE           → LoggingConfig.log_file
#
# USAGE:
# ------
#   from classification_list.config import get_config
#   config = get_config()
#   print(config.identity.id_field)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv

from .logging_config import configure_logging


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class IdentityConfig:
    """How elements are identified for the main index."""
    id_field: str = "id"
    build_main_index: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration for the package logger."""
    level: Optional[str] = None
    log_file: Optional[str] = None


@dataclass
class AppConfig:
    """Main package configuration."""
    identity: IdentityConfig = field(default_factory=IdentityConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _parse_bool(name: str, default: bool) -> bool:
    """
    Read a boolean environment variable.

    Args:
        name: Environment variable name
        default: Value used when the variable is unset or empty

    Returns:
        The parsed boolean

    Raises:
        ValueError: If the value is not a recognised boolean spelling
    """
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value for {name}: {raw!r}")


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Logging settings from the environment are applied when the
    configuration is first built.

    Returns:
        AppConfig: Package configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    # Build identity configuration
    identity_config = IdentityConfig(
        id_field=os.getenv("CLASSLIST_ID_FIELD") or "id",
        build_main_index=_parse_bool("CLASSLIST_BUILD_MAIN_INDEX", True)
    )

    # Build logging configuration
    logging_config = LoggingConfig(
        level=(os.getenv("CLASSLIST_LOG_LEVEL") or "").upper() or None,
        log_file=os.getenv("CLASSLIST_LOG_FILE") or None
    )

    configure_logging(logging_config)

    _config_instance = AppConfig(
        identity=identity_config,
        logging=logging_config
    )

    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration singleton."""
    global _config_instance
    _config_instance = None
