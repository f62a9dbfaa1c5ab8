"""
Product persistence: create, read, partial update and soft delete
"""
from datetime import datetime, timezone
from typing import List, Optional, Union
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from marketplace.core.exceptions import NotFound
from marketplace.core.i18n_logger import get_i18n_logger
from marketplace.core.money import to_minor_units
from marketplace.database.models.product import Product
from marketplace.schemas.product import ProductCreate, ProductUpdate

logger = get_i18n_logger(__name__)

# SQLite INTEGER is a signed 64-bit value
MAX_ROW_ID = 2**63 - 1


def live_products():
    """Base query for products visible to normal traffic, owner eager-loaded"""
    return (
        select(Product)
        .where(Product.deleted_at.is_(None))
        .options(selectinload(Product.owner))
    )


class ProductRepository:
    """
    Data access for products.

    Every method that serves API traffic filters out soft-deleted rows;
    ``find_with_trashed`` is the only way to see them.
    """

    @staticmethod
    async def create(db: AsyncSession, owner_id: int, fields: ProductCreate) -> Product:
        """
        Persist a new product owned by ``owner_id``.

        The owner comes from the authenticated identity only; ``fields`` is
        the validated DTO, copied field by field.
        """
        new_product = Product(
            name=fields.name,
            description=fields.description,
            price=to_minor_units(fields.price),
            owner_id=owner_id,
        )
        db.add(new_product)
        await db.commit()
        return await ProductRepository.reload_with_owner(db, new_product)

    @staticmethod
    async def find_by_id(db: AsyncSession, product_id: int) -> Optional[Product]:
        """Get a live product by ID, or None if absent or soft deleted"""
        if not 1 <= product_id <= MAX_ROW_ID:
            return None
        result = await db.execute(live_products().where(Product.id == product_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_or_404(db: AsyncSession, product_id: int) -> Product:
        """
        Get a live product by ID.

        Raises:
            NotFound: if the ID is unknown or the product was soft deleted
        """
        product = await ProductRepository.find_by_id(db, product_id)
        if product is None:
            logger.info("product.not_found", product_id=product_id)
            raise NotFound()
        return product

    @staticmethod
    async def list_all(db: AsyncSession) -> List[Product]:
        """Get every live product with its owner, oldest first"""
        result = await db.execute(live_products().order_by(Product.id))
        return list(result.scalars().all())

    @staticmethod
    async def update(
        db: AsyncSession,
        product: Product,
        fields: Union[ProductUpdate, dict]
    ) -> Product:
        """
        Apply a partial update.

        Only keys explicitly present in the request are written; price is
        converted to minor units on the way in. ``updated_at`` is always
        touched, even when the values did not change.
        """
        if isinstance(fields, ProductUpdate):
            fields = fields.model_dump(exclude_unset=True)

        if "name" in fields:
            product.name = fields["name"]
        if "description" in fields:
            product.description = fields["description"]
        if "price" in fields:
            product.price = to_minor_units(fields["price"])
        product.updated_at = datetime.now(timezone.utc)

        await db.commit()
        return await ProductRepository.reload_with_owner(db, product)

    @staticmethod
    async def soft_delete(db: AsyncSession, product: Product) -> None:
        """Mark the product deleted; the row and its values stay in storage"""
        product.deleted_at = datetime.now(timezone.utc)
        await db.commit()

    @staticmethod
    async def find_with_trashed(db: AsyncSession, product_id: int) -> Optional[Product]:
        """
        Raw lookup that also returns soft-deleted rows.

        Diagnostic use only (checking a soft delete happened); never routed.
        """
        result = await db.execute(
            select(Product)
            .where(Product.id == product_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def reload_with_owner(db: AsyncSession, product: Product) -> Product:
        """Re-read a product from storage with its owner loaded"""
        result = await db.execute(
            select(Product)
            .where(Product.id == product.id)
            .options(selectinload(Product.owner))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()
