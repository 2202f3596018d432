import logging

import colorlog

from eurobot_api.config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure colored console logging on the root logger."""
    console_formatter = colorlog.ColoredFormatter(
        "%(green)s%(asctime)s%(reset)s - %(purple)s%(name)s - %(log_color)s%(levelname)s%(reset)s - %(message)s",
        log_colors={
            'DEBUG':    'cyan',
            'INFO':     'blue',
            'WARNING':  'yellow',
            'ERROR':    'red',
            'CRITICAL': 'red,bg_white',
        },
        style='%'
    )

    console_handler = colorlog.StreamHandler()
    console_handler.setFormatter(console_formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers
    root_logger.handlers = []
    root_logger.addHandler(console_handler)
