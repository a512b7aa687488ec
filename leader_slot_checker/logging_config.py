import logging
import os
import sys
from datetime import datetime

from .config import LOG_DIR

PACKAGE_LOGGER = 'leader_slot_checker'

SCRIPT_COLOR = '\033[36m'  # Cyan
RESET_COLOR = '\033[0m'

# Log level colors
LEVEL_COLORS = {
    'DEBUG': '\033[37m',       # White
    'INFO': '\033[32m',        # Green
    'WARNING': '\033[33m',     # Yellow
    'ERROR': '\033[31m',       # Red
    'CRITICAL': '\033[41m',    # Red background
}


class ColoredFormatter(logging.Formatter):
    """Console formatter: colored level, script tag and PID in front of the message."""

    def __init__(self, script_name, use_color=True):
        super().__init__('%(asctime)s')
        self.script_name = script_name
        self.use_color = use_color

    def format(self, record):
        record.asctime = self.formatTime(record)
        record.script_name = self.script_name
        record.pid = os.getpid()

        level = record.levelname
        script = f"PY:{record.script_name}"
        if self.use_color:
            level = f"{LEVEL_COLORS.get(record.levelname, RESET_COLOR)}{level}{RESET_COLOR}"
            script = f"{SCRIPT_COLOR}{script}{RESET_COLOR}"

        formatted = f"[{record.asctime}] [{level}] [{script}] [PID:{record.pid}] - {record.getMessage()}"
        if record.exc_info:
            formatted = f"{formatted}\n{self.formatException(record.exc_info)}"
        return formatted


def setup_logging(script_name, log_dir=None, level=logging.INFO, console_stream=None):
    """
    Sets up the package logger for a run.

    Args:
        script_name (str): Name used in the log file name and the console tag.
        log_dir (str, optional): Directory for log files. Defaults to
                                 LEADER_SLOT_CHECKER_LOG_DIR or '~/log'.
        level (int, optional): Logging level for the file handler.
        console_stream (file, optional): Console stream. Defaults to stderr so
                                         stdout only carries the report.
    Returns:
        logging.Logger: The configured package logger.
    """
    if log_dir is None:
        log_dir = LOG_DIR
    if console_stream is None:
        console_stream = sys.stderr

    os.makedirs(log_dir, exist_ok=True)

    logger = logging.getLogger(PACKAGE_LOGGER)

    # Remove existing handlers to prevent duplicate logs on repeated setup
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level)
    logger.propagate = False

    formatted_time = datetime.now().strftime('%Y-%m-%d_%H-%M-%S')
    file_handler = logging.FileHandler(os.path.join(log_dir, f"{script_name}_log_{formatted_time}.log"))
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
    logger.addHandler(file_handler)

    # Console always WARNING or higher unless debugging, the report goes to stdout
    console_handler = logging.StreamHandler(console_stream)
    console_handler.setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)
    use_color = hasattr(console_stream, 'isatty') and console_stream.isatty()
    console_handler.setFormatter(ColoredFormatter(script_name, use_color=use_color))
    logger.addHandler(console_handler)

    return logger
