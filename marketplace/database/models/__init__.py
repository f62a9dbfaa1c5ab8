"""
Database models package initialization
Importing the models registers them on Base.metadata
"""
from marketplace.database.models.user import User
from marketplace.database.models.product import Product

__all__ = ['User', 'Product']
