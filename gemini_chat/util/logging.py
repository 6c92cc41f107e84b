# gemini_chat/util/logging.py

import logging
import sys

LOG_FORMAT = "[%(levelname)s] [%(asctime)s] [%(name)s] [%(funcName)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configures the root logger with a single stdout handler and returns it.

    Safe to call more than once: the level is updated, handlers are only
    attached the first time (uvicorn or pytest may already have installed one).
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    if root.handlers:
        return root

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)

    # The SDK's transport is chatty at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return root
