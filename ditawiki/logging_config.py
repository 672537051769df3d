from __future__ import annotations

"""Central logging configuration for ditawiki.

Import and call :func:`setup_logging` at application start-up.
"""

import copy
import logging
import logging.config
import os
from typing import Optional

from ditawiki.config import ConfigManager

__all__ = ["setup_logging"]


def setup_logging(level: Optional[int] = None) -> None:
    """Configure logging for the application using configuration from YAML files.

    *level*, when given, overrides the console handler level (the CLI maps
    ``--verbose``/``--quiet`` onto it).
    """
    log_dir = os.environ.get("DITAWIKI_LOG_DIR", "logs")
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, "ditawiki.log")

    try:
        config_manager = ConfigManager()
        logging_config = copy.deepcopy(config_manager.get_logging_config())

        if logging_config and isinstance(logging_config, dict) and logging_config.get("version"):
            # Update the filename dynamically
            if "handlers" in logging_config and "file" in logging_config["handlers"]:
                logging_config["handlers"]["file"]["filename"] = log_file
            if level is not None and "console" in logging_config.get("handlers", {}):
                logging_config["handlers"]["console"]["level"] = logging.getLevelName(level)
                root = logging_config.setdefault("root", {})
                root["level"] = logging.getLevelName(min(level, logging.INFO))

            logging.config.dictConfig(logging_config)
            logging.info("===== Logging initialised from config files =====")
        else:
            _setup_minimal_logging(level)
    except (ValueError, TypeError, AttributeError, ImportError, OSError) as exc:
        # dictConfig reports bad sections with these; keep the tool usable
        print(f"Error loading logging config: {exc}")
        _setup_minimal_logging(level)

    _apply_debug_overrides()


def _setup_minimal_logging(level: Optional[int] = None) -> None:
    """Set up minimal console-only logging when config is unavailable."""
    console_level = logging.getLevelName(level) if level is not None else 'INFO'
    minimal_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': console_level,
            },
        },
        'root': {
            'level': 'INFO',
            'handlers': ['console'],
        },
    }

    logging.config.dictConfig(minimal_config)
    logging.error("===== Logging initialised with minimal fallback (config error) =====")


def _apply_debug_overrides() -> None:
    """Apply environment-driven module-specific debug overrides.

    Supports ``DITAWIKI_DEBUG_MODULES=comma,separated,logger,names`` which
    switches the listed loggers to DEBUG.
    """
    extra_modules = os.environ.get('DITAWIKI_DEBUG_MODULES', '').strip()
    targets = [m.strip() for m in extra_modules.split(',') if m.strip()]
    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        # Ensure at least one handler emits DEBUG for this logger
        has_debug_handler = any(
            h.level <= logging.DEBUG for h in logger.handlers
        )
        if not has_debug_handler:
            h = logging.StreamHandler()
            h.setLevel(logging.DEBUG)
            fmt = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            h.setFormatter(fmt)
            logger.addHandler(h)
        logger.info("Debug override active for logger '%s'", name)
