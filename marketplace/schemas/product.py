"""
Product Pydantic schemas for API requests/responses

Request schemas double as the mass-assignment allow-list: only the fields
declared here ever reach the repository, anything else in the payload
(owner_id, user_id, id, ...) is dropped.
"""
from decimal import Decimal
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


NAME_MAX_LENGTH = 255
MIN_PRICE = Decimal("0.01")
# Largest amount whose pence still fit a signed 64-bit INTEGER column
MAX_PRICE = Decimal("92233720368547758.07")


class ProductCreate(BaseModel):
    """Schema for creating a product: every field required"""
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=MIN_PRICE, le=MAX_PRICE, allow_inf_nan=False, description="Price in pounds, e.g. 19.99")


class ProductUpdate(BaseModel):
    """
    Schema for updating a product.

    Every field is optional, but a field that is sent must satisfy the
    same rules as on creation; an explicit null counts as missing.
    Use ``model_dump(exclude_unset=True)`` to get only the sent fields.
    """
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: Optional[str] = Field(None, min_length=1, max_length=NAME_MAX_LENGTH)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[Decimal] = Field(None, ge=MIN_PRICE, le=MAX_PRICE, allow_inf_nan=False)

    @field_validator("name", "description", "price", mode="before")
    @classmethod
    def reject_explicit_null(cls, value: Any) -> Any:
        # Only runs for keys present in the payload
        if value is None:
            raise ValueError("required")
        return value


class SellerResponse(BaseModel):
    """Public view of a product's owner"""
    id: int
    name: str


class ProductResponse(BaseModel):
    """Public shape of a single product"""
    id: int
    name: str
    description: str
    price_gbp: str = Field(..., description="Price in pounds with two decimals")
    created_at: str
    seller: Optional[SellerResponse] = None


class ProductEnvelope(BaseModel):
    """Single product wrapped in the uniform ``data`` envelope"""
    data: ProductResponse


class ProductListEnvelope(BaseModel):
    """Product collection wrapped in the uniform ``data`` envelope"""
    data: List[ProductResponse]


class MessageResponse(BaseModel):
    message: str

