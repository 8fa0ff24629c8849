# tatk/config.py
"""
Configuration management for the tatk library.

Settings are loaded from environment variables or a .env file.

Optional environment variables:
    TATK_FLOAT_WIDTH - Width of the numeric type, 32 or 64 (default: 64)
    LOG_LEVEL        - Logging level (default: INFO)

Example .env file:
    TATK_FLOAT_WIDTH=32
    LOG_LEVEL=DEBUG

The float width is read once, when ``tatk.numeric`` is first imported, and
applies to every indicator in the process.
"""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

cwd_env = Path.cwd() / ".env"
if cwd_env.exists():
    load_dotenv(dotenv_path=cwd_env)
else:
    # Fallback to standard behavior (searches parents)
    load_dotenv()

SUPPORTED_FLOAT_WIDTHS = (32, 64)


def resolve_log_level(level: str) -> int:
    """
    Map a level name to its ``logging`` number.

    Accepts every name ``logging`` itself knows, including ``WARN`` and
    ``NOTSET``, in any case.

    Raises:
        ValueError: If ``logging`` does not know the name
    """
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"LOG_LEVEL must be a logging level name, got '{level}'")
    return number


@dataclass
class Settings:
    """
    Global settings for the tatk library.

    Values are loaded from environment variables on initialization.
    """

    float_width: int = 64
    log_level: str = "INFO"

    def __post_init__(self):
        """
        Refresh values from environment after load_dotenv has run.
        This allows the global 'settings' instance to be populated correctly.
        """
        raw_width = os.getenv("TATK_FLOAT_WIDTH", str(self.float_width))
        try:
            self.float_width = int(raw_width)
        except ValueError:
            raise ValueError(
                f"TATK_FLOAT_WIDTH must be an integer, got '{raw_width}'"
            ) from None
        self.log_level = os.getenv("LOG_LEVEL", self.log_level)

    def validate(self) -> None:
        """
        Validate the loaded settings.

        Only the float width is checked when ``tatk.numeric`` is imported; the
        log level is checked when ``configure_logging`` applies it.

        Raises:
            ValueError: If the float width or log level is not supported
        """
        self.validate_float_width()
        resolve_log_level(self.log_level)

    def validate_float_width(self) -> None:
        if self.float_width not in SUPPORTED_FLOAT_WIDTHS:
            raise ValueError(
                f"TATK_FLOAT_WIDTH must be one of {SUPPORTED_FLOAT_WIDTHS}, "
                f"got {self.float_width}"
            )


def configure_logging(level: str | None = None, force: bool = False) -> None:
    """
    Configure root logger with console output.

    By default, this is non-destructive: if the root logger already has handlers,
    it will do nothing (assuming the application has configured logging).

    Args:
        level: Any ``logging`` level name (DEBUG, INFO, WARN, ...). Defaults to
            ``settings.log_level``.
        force: If True, clear existing handlers and force this configuration

    Raises:
        ValueError: If the level is not a ``logging`` level name
    """
    level_number = resolve_log_level(level or settings.log_level)
    root_logger = logging.getLogger()

    # If logging is already configured and we aren't forcing it, exit.
    if root_logger.hasHandlers() and not force:
        return

    root_logger.setLevel(level_number)

    if force:
        root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


# Global settings instance - loaded when module is imported
settings = Settings()
