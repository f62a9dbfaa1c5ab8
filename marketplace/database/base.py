"""
Declarative base shared by every marketplace model
"""
from sqlalchemy.orm import declarative_base

# Create base class for all models
Base = declarative_base()
