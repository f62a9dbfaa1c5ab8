"""
Ownership-based permission checks for products

Listing and showing products is public. Creating needs an identity;
updating and deleting need an identity that owns the product.
"""
from typing import Optional

from marketplace.core.exceptions import AuthenticationRequired, AuthorizationDenied
from marketplace.core.i18n_logger import get_i18n_logger
from marketplace.database.models.product import Product
from marketplace.database.models.user import User

logger = get_i18n_logger("permissions")


def can_mutate(user: Optional[User], product: Product) -> bool:
    """
    Single source of truth for "may this user change this product".

    Used identically by update and delete.
    """
    return user is not None and product.owner_id == user.id


def require_identity(user: Optional[User], action: str = "create") -> User:
    """
    Ensure the request is authenticated.

    Raises:
        AuthenticationRequired: if the user is anonymous
    """
    if user is None:
        logger.warning("auth.unauthenticated", action=action)
        raise AuthenticationRequired()
    return user


def authorize_product_mutation(user: Optional[User], product: Product, action: str) -> User:
    """
    Check that ``user`` may update or delete ``product``.

    The product must already be resolved: a missing product is a 404
    before this runs.

    Raises:
        AuthenticationRequired: if the user is anonymous
        AuthorizationDenied: if the user is not the owner
    """
    user = require_identity(user, action)
    if not can_mutate(user, product):
        logger.warning(
            "auth.ownership_denied",
            user_id=user.id,
            action=action,
            product_id=product.id,
            owner_id=product.owner_id
        )
        raise AuthorizationDenied()
    return user
