"""
Database package initialization
Centralized imports for all database components
"""
from marketplace.database.base import Base
from marketplace.database.session import engine, AsyncSessionLocal, get_db, build_engine, build_session_factory
from marketplace.database.models import User, Product

__all__ = [
    'Base', 'engine', 'AsyncSessionLocal', 'get_db',
    'build_engine', 'build_session_factory',
    'User', 'Product'
]
