"""Logging setup shared by the app and the storage layer."""

import logging

LOG_FORMAT = '[%(asctime)s] %(levelname)s %(name)s: %(message)s'


def configure_logging(level='INFO'):
    """Apply a basic config once, unless the host has already configured logging."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger('hotel_revenue').setLevel(level)
    return logging.getLogger('hotel_revenue')
