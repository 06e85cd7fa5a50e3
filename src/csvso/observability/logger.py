import logging
import json
import sys
import time
import uuid
import os

LOGGER_NAME = "csv_so_utility"


class Colors:
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    MAGENTA = "\033[35m"


def use_color() -> bool:
    # LOG_COLOR=1 and a terminal on stdout
    return os.getenv("LOG_COLOR", "0") == "1" and sys.stdout.isatty()


def colorize(text: str, color: str) -> str:
    if not use_color():
        return text
    return f"{color}{text}{Colors.RESET}"


def _event_color(event_type: str) -> str:
    et = (event_type or "").upper()
    if et.endswith("_FAILED"):
        return Colors.RED
    if et.endswith("_SKIPPED"):
        return Colors.YELLOW
    if et.endswith(("_STARTED", "_COMPLETED")):
        return Colors.GREEN
    return Colors.MAGENTA


def get_logger():
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


logger = get_logger()


def generate_request_id():
    return str(uuid.uuid4())


def log_event(event_type: str, payload: dict):
    """
    One JSON object per line: {"event_type": ..., **payload}.
    Non-JSON values (paths, enums) are rendered with str().
    """
    text = json.dumps({"event_type": event_type, **payload}, ensure_ascii=False, default=str)
    logger.info(colorize(text, _event_color(event_type)))


class RequestTimer:
    """
    Wall-clock duration of one Generate / Import / Export call.
    """
    def __init__(self):
        self.start_time = time.time()

    def duration(self):
        return round(time.time() - self.start_time, 4)
