"""
Maps product entities onto their public JSON shape
"""
from datetime import datetime
from typing import Iterable, Optional
from sqlalchemy import inspect

from marketplace.config import CREATED_AT_FORMAT
from marketplace.core.money import to_display_string
from marketplace.database.models.product import Product
from marketplace.schemas.product import (
    ProductResponse, SellerResponse, ProductEnvelope, ProductListEnvelope
)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.strftime(CREATED_AT_FORMAT) if value is not None else None


def format_seller(product: Product) -> Optional[SellerResponse]:
    """
    Public seller info, or None when the owner was not loaded.

    Checking the load state instead of touching ``product.owner`` keeps an
    unloaded relationship from triggering a lazy load.
    """
    if "owner" in inspect(product).unloaded:
        return None
    owner = product.owner
    if owner is None:
        return None
    return SellerResponse(id=owner.id, name=owner.name)


def format_product(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        description=product.description,
        price_gbp=to_display_string(product.price),
        created_at=format_timestamp(product.created_at),
        seller=format_seller(product),
    )


def product_item(product: Product) -> ProductEnvelope:
    """Single product in the ``{"data": {...}}`` envelope"""
    return ProductEnvelope(data=format_product(product))


def product_collection(products: Iterable[Product]) -> ProductListEnvelope:
    """Products in the ``{"data": [...]}`` envelope"""
    return ProductListEnvelope(data=[format_product(product) for product in products])
