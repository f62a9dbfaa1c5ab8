"""
User database model
"""
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship, validates
from marketplace.database.base import Base


class User(Base):
    """
    User Model for storing account details in database

    Only ``id`` and ``name`` ever leave the API inside a product response;
    ``email`` is returned to the account holder alone (``/auth/me``).

    Attributes:
        id: Unique identifier for the user
        name: Public display name shown as the seller of a listing
        email: Unique login identifier
        hashed_password: Securely hashed password using bcrypt
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False)

    # Listings this user sells, soft-deleted ones included
    products = relationship("Product", back_populates="owner")

    @validates('email')
    def validate_email(self, key, value):
        """Emails are compared case-insensitively"""
        return value.strip().lower()

    def __repr__(self):
        return f"<User {self.id} ({self.name})>"
