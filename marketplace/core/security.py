"""
Security utilities: JWT, password hashing, identity resolution (ASYNC VERSION)
"""
from typing import Annotated, Optional
from datetime import datetime, timedelta, timezone
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession
from marketplace.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES, API_VERSION
from marketplace.database.session import get_db
from marketplace.database.models.user import User
from marketplace.core.i18n_logger import get_i18n_logger

if not SECRET_KEY or not ALGORITHM:
    raise RuntimeError("SECRET_KEY and ALGORITHM must be set in environment variables")

# Initialize password hashing and OAuth2
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# auto_error=False: anonymous requests reach the handler with token=None,
# the handler decides whether an identity is needed
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"/api/{API_VERSION}/auth/token", auto_error=False)

logger = get_i18n_logger(__name__)


# === Password Utilities ===

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Args:
        plain_password: The password to verify
        hashed_password: The hashed password from database

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password with bcrypt"""
    return pwd_context.hash(password)


# === JWT Token Utilities ===

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT access token.

    Args:
        data: Data to encode in token (typically {"sub": str(user.id)})
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({
        "exp": expire,
        "iat": datetime.now(timezone.utc),  # Issued at
        "type": "access"
    })

    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def create_token_for_user(user: User) -> str:
    return create_access_token(data={"sub": str(user.id)})


def decode_token(token: str) -> dict:
    """
    Decode and validate a JWT token.

    Raises:
        JWTError: If token is invalid
        ExpiredSignatureError: If token has expired
    """
    return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])


async def resolve_user(token: Optional[str], db: AsyncSession) -> Optional[User]:
    """
    Map a bearer token onto a stored user.

    Returns None for a missing, malformed, expired or orphaned token rather
    than raising; callers choose the failure response.
    """
    if not token:
        return None

    try:
        payload = decode_token(token)
    except ExpiredSignatureError:
        logger.info("auth.token.invalid", reason="expired")
        return None
    except JWTError as e:
        logger.info("auth.token.invalid", reason=str(e))
        return None

    subject = payload.get("sub")
    if payload.get("type") != "access" or subject is None:
        logger.info("auth.token.invalid", reason="not an access token")
        return None

    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        logger.info("auth.token.invalid", reason="malformed subject")
        return None

    user = await db.get(User, user_id)
    if user is None:
        logger.info("auth.token.invalid", reason=f"unknown user {user_id}")
    return user


# === Authentication Dependencies ===

async def get_optional_user(
    token: Annotated[Optional[str], Depends(oauth2_scheme)],
    db: Annotated[AsyncSession, Depends(get_db)]
) -> Optional[User]:
    """
    Current user if the request carries a valid bearer token, else None.

    Product endpoints use this so that a missing product answers 404
    before an anonymous caller is told 401.
    """
    return await resolve_user(token, db)


async def get_current_user(
    user: Annotated[Optional[User], Depends(get_optional_user)]
) -> User:
    """
    Get current authenticated user, rejecting anonymous requests.

    Raises:
        HTTPException 401: If no valid token was supplied
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
