"""Console logging for k3sargo.

Everything is logged below the ``k3sargo`` logger, so configuring that one
logger is enough for the CLI.
"""
import logging
import sys

from k3sargo.config import Config

PACKAGE_LOGGER = "k3sargo"
NOISY_LOGGERS = ("urllib3", "kubernetes")


class ColorFormatter(logging.Formatter):
    COLORS = {
        logging.DEBUG: "\033[0;37m",
        logging.WARNING: "\033[1;33m",
        logging.ERROR: "\033[0;31m",
        logging.CRITICAL: "\033[0;31m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool) -> None:
        super().__init__(Config.LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        color = self.COLORS.get(record.levelno)
        if not self.use_color or not color:
            return base
        return f"{color}{base}{self.RESET}"


def configure_logging(debug: bool = False) -> logging.Logger:
    """Attach a console handler to the package logger and set its level.

    Safe to call more than once; only the level changes on later calls.
    Third-party loggers are held at WARNING unless debugging.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if debug else Config.LOG_LEVEL)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ColorFormatter(sys.stdout.isatty()))
        logger.addHandler(handler)

    noisy_level = logging.DEBUG if debug else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)
    return logger
