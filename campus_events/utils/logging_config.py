"""Logging configuration for the application."""

import logging
import os
import sys

_HANDLER_NAME = 'campus_events_console'


def setup_logging():
    """Configure logging for the application."""
    root_logger = logging.getLogger()

    # Importing the app more than once (tests, reloader) must not stack handlers
    if any(handler.get_name() == _HANDLER_NAME for handler in root_logger.handlers):
        return

    # Create a formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Create a console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(_HANDLER_NAME)
    console_handler.setFormatter(formatter)

    # Configure the root logger
    root_logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO').upper())
    root_logger.addHandler(console_handler)

    # Set higher log levels for noisy components
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
