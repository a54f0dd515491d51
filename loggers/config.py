import logging
from typing import Dict, Optional, Union

DEFAULT_LOG_LEVELS = {
    "deck": logging.INFO,
    "storage": logging.INFO,
}


def configure_loggers(log_levels: Optional[Dict[str, Union[int, str]]] = None) -> None:
    """Set the level of the deck and storage loggers.

    Args:
        log_levels: Maps "deck" or "storage" to a level, given as an int
                    (logging.DEBUG) or a case-insensitive name ("debug").
                    Loggers not listed are reset to DEFAULT_LOG_LEVELS.

    Raises:
        ValueError: If a level name is not known to logging
    """
    levels = log_levels or {}

    for logger_name, default_level in DEFAULT_LOG_LEVELS.items():
        level = levels.get(logger_name, default_level)

        if isinstance(level, str):
            resolved = logging.getLevelName(level.upper())
            if not isinstance(resolved, int):
                raise ValueError(f"Unknown log level: {level}")
            level = resolved

        logging.getLogger(f"loggers.{logger_name}_logger").setLevel(level)
