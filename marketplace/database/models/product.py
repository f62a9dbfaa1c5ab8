"""
Product database model
A listing owned by exactly one user, soft deleted rather than removed
"""
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, CheckConstraint
from sqlalchemy.orm import relationship, validates
from marketplace.database.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    """
    Product listing.

    ``price`` is an integer number of pence; conversion to and from the
    decimal display form lives in ``marketplace.core.money``.
    ``deleted_at`` set means the listing is soft deleted: it stays in the
    table but every live read path filters it out.
    """
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_products_positive_price"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Integer, nullable=False)  # Minor units (pence)

    # Set once from the authenticated identity, never reassigned
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    owner = relationship("User", back_populates="products")

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @validates('price')
    def validate_price(self, key, value):
        """Stored price must be a positive whole number of pence"""
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(f"price must be a positive integer of minor units, got {value!r}")
        return value

    @validates('owner_id')
    def validate_owner_id(self, key, value):
        """Ownership is fixed at creation"""
        if self.owner_id is not None and value != self.owner_id:
            raise ValueError("owner_id cannot be changed once set")
        return value

    def __repr__(self):
        deleted = " (deleted)" if self.is_deleted else ""
        return f"<Product {self.id} - {self.name} - {self.price}p{deleted}>"
