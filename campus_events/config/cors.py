"""CORS configuration for the FastAPI application."""

import os

from .environment import IS_PRODUCTION_ENVIRONMENT


def _production_origins():
    """Origins allowed in production, from CORS_ALLOWED_ORIGINS (comma separated)."""
    raw = os.environ.get('CORS_ALLOWED_ORIGINS', '')
    return [origin.strip() for origin in raw.split(',') if origin.strip()]


# CORS Origins configuration
ALLOWED_ORIGINS = {
    False: ["*"],  # Development - allow all
    True: _production_origins(),
}

# CORS Methods configuration
ALLOWED_METHODS = [
    "GET",
    "POST",
    "PUT",
    "DELETE",
    "OPTIONS"   # Required for CORS preflight
]

# CORS Headers configuration
ALLOWED_HEADERS = [
    "Content-Type",
    "Accept",
]

CORS_CONFIG = {
    "allow_origins": ALLOWED_ORIGINS[IS_PRODUCTION_ENVIRONMENT],
    "allow_credentials": True,
    "allow_methods": ALLOWED_METHODS,
    "allow_headers": ALLOWED_HEADERS,
    "expose_headers": [],
    "max_age": 3600,
}
