"""
API v1 router - combines all v1 endpoints
"""
from fastapi import APIRouter
from marketplace.api.v1.endpoints import auth, products

# Create main v1 router
api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth")
api_router.include_router(products.router, prefix="/products")
