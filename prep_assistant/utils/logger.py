"""
Logging configuration
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
HANDLER_NAME = "prep_assistant"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger to write to stdout.
    
    Safe to call more than once; later calls only adjust the level.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        root.addHandler(handler)
    
    root.setLevel(log_level)
