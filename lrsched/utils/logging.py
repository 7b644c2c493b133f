"""
Logging setup for lrsched.

Scheduler code logs through module-level ``logging.getLogger(__name__)``
loggers and attaches the scheduler it is talking about as ``extra``
fields (see ``scheduler_context``). The handlers configured here render
those fields, so every line says which scheduler and which record it
refers to:

    2024-05-01 12:00:00 | INFO     | step@0     | Created scheduler: StepLrScheduler(...)
    2024-05-01 12:00:03 | INFO     | warmup@1200 | Scheduler 'warmup' restored

Example:
    >>> from lrsched.utils import setup_logging
    >>>
    >>> logger = setup_logging(log_dir='logs')
    >>> scheduler = create_scheduler('noam', init_lr=1.0)
"""

import os
import sys
import logging
from typing import Optional
from datetime import datetime


LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(scheduler)s@%(record)-5s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class SchedulerContextFilter(logging.Filter):
    """
    Make sure every record carries ``scheduler`` and ``record`` fields.

    Lines logged without scheduler context (third-party code, plain
    ``logger.info`` calls) get ``-`` placeholders so ``LOG_FORMAT`` never
    fails on them.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, 'scheduler'):
            record.scheduler = '-'
        if not hasattr(record, 'record'):
            record.record = '-'
        return True


class SchedulerFormatter(logging.Formatter):
    """
    Formatter for scheduler log lines, optionally coloring the level name.

    Args:
        colored: Wrap level names in ANSI color codes
    """

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, fmt: str = LOG_FORMAT, datefmt: str = DATE_FORMAT, colored: bool = False):
        super().__init__(fmt, datefmt=datefmt)
        self.colored = colored

    def format(self, record: logging.LogRecord) -> str:
        if not self.colored or record.levelname not in self.COLORS:
            return super().format(record)

        # Records are shared between handlers; restore after formatting
        levelname = record.levelname
        record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def _make_handler(handler: logging.Handler, level: int, colored: bool) -> logging.Handler:
    handler.setLevel(level)
    handler.addFilter(SchedulerContextFilter())
    handler.setFormatter(SchedulerFormatter(colored=colored))
    return handler


def setup_logging(
    name: str = 'lrsched',
    log_dir: Optional[str] = None,
    level: int = logging.INFO,
    console: bool = True,
    colored: bool = True
) -> logging.Logger:
    """
    Configure the package logger to show scheduler context.

    Child loggers (``lrsched.training.schedulers.factory``,
    ``lrsched.utils.checkpoint``, ...) propagate here, so configuring the
    default ``'lrsched'`` logger covers all of them.

    Args:
        name: Logger name
        log_dir: Directory for a timestamped log file (no file if None)
        level: Logging level
        console: Log to stdout
        colored: Color level names on the console

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = []

    if console:
        logger.addHandler(_make_handler(logging.StreamHandler(sys.stdout), level, colored))

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        log_file = os.path.join(log_dir, f'{name}_{timestamp}.log')
        logger.addHandler(_make_handler(logging.FileHandler(log_file), level, colored=False))
        logger.info(f"Logging to file: {log_file}")

    return logger
