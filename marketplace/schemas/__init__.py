from marketplace.schemas.product import (
    ProductCreate, ProductUpdate, ProductResponse, SellerResponse,
    ProductEnvelope, ProductListEnvelope, MessageResponse
)
from marketplace.schemas.user import UserCreate, UserResponse, Token
from marketplace.schemas.validation import collect_errors, validate_payload

__all__ = [
    'ProductCreate', 'ProductUpdate', 'ProductResponse', 'SellerResponse',
    'ProductEnvelope', 'ProductListEnvelope', 'MessageResponse',
    'UserCreate', 'UserResponse', 'Token',
    'collect_errors', 'validate_payload'
]
