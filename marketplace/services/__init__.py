from marketplace.services.product_repository import ProductRepository
from marketplace.services.product_formatter import (
    format_product, product_item, product_collection
)

__all__ = ['ProductRepository', 'format_product', 'product_item', 'product_collection']
