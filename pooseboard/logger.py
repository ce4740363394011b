import logging
from .config import server

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
ROOT_LOGGER = 'pooseboard'

def _configure(root: logging.Logger):
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(server.LOG_LEVEL.upper())

def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Return a logger under the service namespace, configuring it on first use"""
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        _configure(root)
    return logging.getLogger(name)
