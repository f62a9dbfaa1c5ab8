"""
Error taxonomy for the marketplace API
Each error carries the HTTP status the exception handlers answer with
"""
from typing import Dict, List, Optional
from fastapi import status


class MarketplaceError(Exception):
    """Base class for errors that map onto a client-facing HTTP response"""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Bad request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFound(MarketplaceError):
    """Identifier does not resolve to a live (non soft-deleted) record"""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Product not found"


class AuthenticationRequired(MarketplaceError):
    """Request needs an identity but none could be resolved"""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "You must be logged in"


class AuthorizationDenied(MarketplaceError):
    """Identity is known but does not own the resource"""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "You do not own this product"


class ValidationFailed(MarketplaceError):
    """
    One or more field rules were violated.

    ``errors`` maps each offending field to every message raised for it,
    so clients see all violations at once.
    """
    status_code = 422  # Unprocessable content
    default_message = "The given data was invalid."

    def __init__(self, errors: Dict[str, List[str]], message: Optional[str] = None):
        self.errors = errors
        super().__init__(message)
