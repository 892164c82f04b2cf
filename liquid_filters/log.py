import logging

from .config import log_level


def setup_logging(level=None):
    """Setup basic logging configuration"""
    logging.basicConfig(
        level=level or log_level(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
    return logging.getLogger("liquid_filters")
