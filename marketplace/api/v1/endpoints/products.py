"""
Product management endpoints

Listing and showing are public. Creating needs a logged-in user; updating
and deleting are reserved to the user who created the product.
"""
import json
from typing import Any
from fastapi import APIRouter, Request, status

from marketplace.core.dependencies import DbDependency, OptionalUser
from marketplace.core.exceptions import ValidationFailed
from marketplace.core.i18n_logger import get_i18n_logger
from marketplace.core.permissions import authorize_product_mutation, require_identity
from marketplace.schemas.product import (
    ProductCreate, ProductUpdate, ProductEnvelope, ProductListEnvelope, MessageResponse
)
from marketplace.schemas.validation import validate_payload
from marketplace.services.product_formatter import product_item, product_collection
from marketplace.services.product_repository import ProductRepository

router = APIRouter(tags=["Products"])

logger = get_i18n_logger(__name__)


def json_body_schema(schema) -> dict:
    """Document a body the handler parses itself"""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }


async def read_payload(request: Request) -> Any:
    """
    Decode the JSON body without validating it.

    Handlers validate explicitly so that lookup and authorization answer
    before validation does. An empty body decodes to an empty object.
    """
    body = await request.body()
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except ValueError:
        raise ValidationFailed({"body": ["The request body must be valid JSON."]})


@router.get("", response_model=ProductListEnvelope)
async def list_products(db: DbDependency):
    """List every live product with its seller (public endpoint)"""
    products = await ProductRepository.list_all(db)
    return product_collection(products)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductEnvelope,
    openapi_extra=json_body_schema(ProductCreate)
)
async def create_product(request: Request, user: OptionalUser, db: DbDependency):
    """
    Create a product owned by the caller.

    Process:
    1. Require a logged-in user (401)
    2. Validate the payload (422)
    3. Store the price in pence with the caller as owner
    """
    owner = require_identity(user, "create")
    fields = validate_payload(ProductCreate, await read_payload(request))

    product = await ProductRepository.create(db, owner.id, fields)

    logger.info("product.created", product_id=product.id, owner_id=owner.id)
    return product_item(product)


@router.get("/{product_id}", response_model=ProductEnvelope)
async def get_product(product_id: int, db: DbDependency):
    """Get a specific product by ID (public endpoint)"""
    product = await ProductRepository.get_or_404(db, product_id)
    return product_item(product)


@router.put(
    "/{product_id}",
    response_model=ProductEnvelope,
    openapi_extra=json_body_schema(ProductUpdate)
)
async def update_product(product_id: int, request: Request, user: OptionalUser, db: DbDependency):
    """
    Update a product; only the fields sent are changed.

    Order: lookup (404), login (401), ownership (403), validation (422).
    """
    product = await ProductRepository.get_or_404(db, product_id)
    owner = authorize_product_mutation(user, product, "update")
    fields = validate_payload(ProductUpdate, await read_payload(request))

    changes = fields.model_dump(exclude_unset=True)
    product = await ProductRepository.update(db, product, changes)

    logger.info("product.updated", product_id=product.id, owner_id=owner.id, fields=", ".join(changes) or "none")
    return product_item(product)


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: int, user: OptionalUser, db: DbDependency):
    """Soft delete a product (owner only)"""
    product = await ProductRepository.get_or_404(db, product_id)
    owner = authorize_product_mutation(user, product, "delete")

    await ProductRepository.soft_delete(db, product)

    logger.info("product.deleted", product_id=product_id, owner_id=owner.id)
    return {"message": "Product deleted successfully"}
