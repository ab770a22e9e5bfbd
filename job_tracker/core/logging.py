import logging
import sys
from pathlib import Path
from typing import Union
from logging.handlers import RotatingFileHandler

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5

# Chatty loggers pulled in by streamlit's file watcher and asset serving
QUIET_LOGGERS = ("watchdog", "urllib3", "PIL", "tornado.access")

def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO

def setup_logging(log_file: Path, level: Union[int, str] = logging.INFO, console: bool = True) -> logging.Logger:
    """
    Attaches a rotating file handler (and optionally stdout) to the root logger.
    Safe to call on every Streamlit rerun: handlers are only added once,
    later calls just adjust the level.
    """
    level = _resolve_level(level)
    root = logging.getLogger()
    root.setLevel(level)

    existing = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
    if existing:
        for handler in root.handlers:
            if handler in existing or getattr(handler, "stream", None) is sys.stdout:
                handler.setLevel(level)
        return root

    log_file.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT)

    handlers = [RotatingFileHandler(log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS)]
    if console:
        handlers.append(logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root
