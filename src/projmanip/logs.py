import logging
import os
import sys
from pathlib import Path

DEFAULT_LOG_DIR = Path.home() / ".local" / "share" / "projmanip" / "logs"

def _resolve_level(is_debug: bool) -> int:
    env_level = os.getenv('PROJMANIP_LOG_LEVEL', '').upper()
    if is_debug:
        return logging.DEBUG
    if env_level:
        return getattr(logging, env_level, logging.WARNING)
    return logging.WARNING  # Default: build logs only show warnings and errors

def setup_logging():
    """Set up logging configuration for projmanip package with environment-based levels."""
    is_debug = os.getenv('PROJMANIP_DEBUG', '').lower() in ('1', 'true', 'yes')
    level = _resolve_level(is_debug)

    log_format = '[%(asctime)s] %(levelname)-8s [%(name)s:%(funcName)s:%(lineno)d] %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    detailed_formatter = logging.Formatter(log_format, date_format)
    console_formatter = logging.Formatter(
        '%(levelname)-8s [%(name)s] %(message)s' if is_debug
        else '%(levelname)s: %(message)s'
    )

    logger = logging.getLogger('projmanip')
    logger.setLevel(logging.DEBUG)  # Logger accepts all, handlers filter
    logger.handlers.clear()

    # File handler (always detailed); skipped when the log dir is not writable
    log_dir = Path(os.getenv('PROJMANIP_LOG_DIR', DEFAULT_LOG_DIR))
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "projmanip.log")
    except OSError:
        file_handler = None
    if file_handler is not None:
        file_handler.setFormatter(detailed_formatter)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    # Console goes to stderr so stdout stays usable for command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    logger.propagate = False

    return logger

# Initialize logging when package is imported
setup_logging()

def get_logger(name: str = None):
    """Get a logger instance for a specific module."""
    if name:
        return logging.getLogger(f'projmanip.{name}')
    return logging.getLogger('projmanip')
