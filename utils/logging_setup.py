"""
Logging setup utilities for the game engine.

The engine modules only create module-level loggers; this helper is the
single place that attaches handlers, for drivers and ad-hoc scripts.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    format_string: Optional[str] = None
) -> Optional[Path]:
    """
    Configure the root logger to write to the console and, optionally, a file.

    Handlers installed by earlier calls are removed first, so repeated
    calls do not duplicate output.

    Args:
        level: Logging level (default: logging.INFO)
        log_file: Optional log file path; missing parent directories are created
        format_string: Optional custom format string. If None, uses DEFAULT_FORMAT.

    Returns:
        Path of the log file, or None when logging to the console only

    Example:
        >>> setup_logging(logging.DEBUG, "logs/engine.log")
        >>> logging.getLogger("blokus.game_state").debug("written to console and file")
    """
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    log_path = None
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, mode='w', encoding='utf-8'))

    root = logging.getLogger()
    root.setLevel(level)
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    return log_path
