"""Configuration package."""

from .environment import ENVIRONMENT, IS_PRODUCTION_ENVIRONMENT

__all__ = ['ENVIRONMENT', 'IS_PRODUCTION_ENVIRONMENT']
