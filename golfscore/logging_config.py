"""Logging setup for golfscore.

Every module logs through a child of the 'golfscore' logger
('golfscore.baseline', 'golfscore.skins', ...). setup_logging attaches the
handlers once on the parent; the level comes from scoring_config.json unless
the caller passes one.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .config import get_log_level

ROOT_LOGGER = 'golfscore'

FILE_FORMAT = '%(asctime)s %(levelname)-8s %(name)s:%(lineno)d %(message)s'
CONSOLE_FORMAT = '%(levelname)s [%(name)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = get_log_level()
    if isinstance(level, str):
        return logging.getLevelName(level.upper())
    return level


def _file_handler(log_dir: Path, level: int) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    handler = logging.FileHandler(log_dir / f'golfscore_{stamp}.log', encoding='utf-8')
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _console_handler(level: int) -> logging.Handler:
    # Warnings from baseline loading should reach stderr, not the app's stdout
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logging(
    log_dir: Optional[Path] = None,
    level: Union[int, str, None] = None,
    log_to_file: bool = True,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Attach file and console handlers to the 'golfscore' logger.

    Calling it again replaces the handlers instead of adding more.

    Args:
        log_dir: Directory for log files (default: ./logs)
        level: Level as a number or name (default: log_level from config)
        log_to_file: Write a timestamped golfscore_*.log file
        log_to_console: Echo records to stderr

    Returns:
        The configured 'golfscore' logger
    """
    resolved = _resolve_level(level)
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(resolved)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_to_file:
        logger.addHandler(_file_handler(Path(log_dir or 'logs'), resolved))
    if log_to_console:
        logger.addHandler(_console_handler(resolved))

    logger.debug(f'Logging configured at {logging.getLevelName(resolved)}')
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a golfscore module, e.g. get_logger('skins')."""
    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(f'{ROOT_LOGGER}.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{ROOT_LOGGER}.{name}')
