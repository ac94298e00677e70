"""Environment configuration module.

Import this before any module that reads environment variables: it loads the
``.env`` file (python-dotenv) once, for the API and the helper scripts alike.
In production the variables come from the platform instead.

Recognised variables:
    ENVIRONMENT   'development' (default) or 'production'
    DATABASE_URL  SQLAlchemy URL; required in production
    CORS_ALLOWED_ORIGINS  comma separated origins allowed in production
    LOG_LEVEL     root log level, INFO by default
"""

import os
import logging
from dotenv import load_dotenv

load_dotenv()

ENVIRONMENT = os.environ.get('ENVIRONMENT', '').strip().lower()
IS_PRODUCTION_ENVIRONMENT = ENVIRONMENT == 'production'

if ENVIRONMENT not in ('development', 'production'):
    logging.getLogger(__name__).warning(
        f"Environment setting '{ENVIRONMENT}' is invalid or not specified. "
        "Expected 'development' or 'production'. Defaulting to development environment."
    )
    ENVIRONMENT = 'development'

__all__ = ['ENVIRONMENT', 'IS_PRODUCTION_ENVIRONMENT']
