"""
Authentication endpoints: account registration and bearer token issuance
"""
from typing import Annotated
from fastapi import APIRouter, HTTPException, status, Depends
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy import select

from marketplace.config import ACCESS_TOKEN_EXPIRE_MINUTES
from marketplace.core.dependencies import DbDependency, CurrentUser
from marketplace.core.exceptions import ValidationFailed
from marketplace.core.i18n_logger import get_i18n_logger
from marketplace.core.security import verify_password, get_password_hash, create_token_for_user
from marketplace.database.models.user import User
from marketplace.schemas.user import UserCreate, UserResponse, Token

router = APIRouter(tags=["Authentication"])

logger = get_i18n_logger(__name__)


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
async def register(user_data: UserCreate, db: DbDependency):
    """Register a new account"""
    email = user_data.email.lower()
    existing = await db.execute(select(User).where(User.email == email))
    if existing.scalar_one_or_none() is not None:
        raise ValidationFailed({"email": ["The email has already been taken."]})

    new_user = User(
        name=user_data.name,
        email=email,
        hashed_password=get_password_hash(user_data.password),
    )
    db.add(new_user)
    await db.commit()
    await db.refresh(new_user)

    logger.info("user.registered", user_id=new_user.id, email=new_user.email)
    return new_user


@router.post("/token", response_model=Token)
async def login(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    db: DbDependency
):
    """Exchange email (sent as ``username``) and password for a JWT"""
    result = await db.execute(select(User).where(User.email == form_data.username.strip().lower()))
    user = result.scalar_one_or_none()
    if not user or not verify_password(form_data.password, user.hashed_password):
        logger.warning("auth.login.failed", email=form_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.info("auth.login.success", user_id=user.id)
    return {
        "access_token": create_token_for_user(user),
        "token_type": "bearer",
        "expires_in": ACCESS_TOKEN_EXPIRE_MINUTES * 60,  # In seconds
    }


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: CurrentUser):
    """Get current user information"""
    return current_user
