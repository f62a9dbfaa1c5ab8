"""
Marketplace listing API: browse products publicly, manage your own listings
"""
from marketplace.database import Base, engine
from marketplace.api import api_router
from marketplace.core.exception_handlers import register_exception_handlers

__version__ = "0.1.0"

__all__ = ['Base', 'engine', 'api_router', 'register_exception_handlers', '__version__']
