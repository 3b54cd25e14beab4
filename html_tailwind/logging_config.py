from __future__ import annotations

"""Central logging configuration for html_tailwind.

Import and call :func:`setup_logging` at application start-up. Library code
only ever calls ``logging.getLogger(__name__)``.
"""

import copy
import logging
import os
import logging.config
from typing import Any, Dict, List

from html_tailwind.config import ConfigManager

__all__ = ["setup_logging"]

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application using configuration from YAML files."""
    log_dir = os.environ.get("HTML_TAILWIND_LOG_DIR", "logs")
    log_file = os.path.join(log_dir, "html_tailwind.log")

    config_manager = ConfigManager()
    logging_config = config_manager.get_logging_config()

    if logging_config and isinstance(logging_config, dict) and logging_config.get("version"):
        logging_config = _copy_config(logging_config)
        # Update the filename dynamically
        if "handlers" in logging_config and "file" in logging_config["handlers"]:
            os.makedirs(log_dir, exist_ok=True)
            logging_config["handlers"]["file"]["filename"] = log_file
        try:
            logging.config.dictConfig(logging_config)
            logging.info("===== Logging initialised from config files =====")
        except (ValueError, TypeError, AttributeError, ImportError) as exc:
            _setup_minimal_logging()
            logging.error("Invalid logging config, using minimal fallback: %s", exc)
    else:
        _setup_minimal_logging()

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        for handler in logging.getLogger().handlers:
            handler.setLevel(logging.DEBUG)

    # Apply environment-driven debug overrides (module-specific)
    _apply_debug_overrides()


def _copy_config(config: Dict[str, Any]) -> Dict[str, Any]:
    # dictConfig mutates its input; keep the cached section intact
    return copy.deepcopy(config)


def _setup_minimal_logging() -> None:
    """Set up minimal console-only logging when config is unavailable."""
    minimal_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': _FORMAT,
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': 'INFO',
            },
        },
        'root': {
            'level': 'INFO',
            'handlers': ['console'],
        },
    }

    logging.config.dictConfig(minimal_config)
    logging.warning("===== Logging initialised with minimal fallback =====")


def _apply_debug_overrides() -> None:
    """Apply environment-driven module-specific debug overrides.

    Supports:
    - HTML_TAILWIND_DEBUG_MODULES=comma,separated,logger,names -> DEBUG for listed loggers
    """
    extra_modules = os.environ.get('HTML_TAILWIND_DEBUG_MODULES', '').strip()
    targets: List[str] = [m.strip() for m in extra_modules.split(',') if m.strip()]
    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        # Ensure at least one handler emits DEBUG for this logger
        has_debug_handler = any(h.level <= logging.DEBUG for h in logger.handlers)
        if not has_debug_handler:
            h = logging.StreamHandler()
            h.setLevel(logging.DEBUG)
            h.setFormatter(logging.Formatter(_FORMAT))
            logger.addHandler(h)
        logger.info("Debug override active for logger '%s'", name)
