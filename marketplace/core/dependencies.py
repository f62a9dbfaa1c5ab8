"""
Shared dependencies across the application (ASYNC VERSION)

Type-annotated dependencies that keep endpoint signatures short.

Usage example:
    @router.post("/")
    async def create_product(
        db: DbDependency,
        user: OptionalUser
    ):
        # db is AsyncSession
        # user is a User model, or None for anonymous callers
        ...
"""
from typing import Annotated, Optional
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.database.session import get_db
from marketplace.database.models.user import User
from marketplace.core.security import get_current_user, get_optional_user


# === Database Dependency ===

DbDependency = Annotated[AsyncSession, Depends(get_db)]
"""
Async database session dependency.

Use this instead of manually adding `db: AsyncSession = Depends(get_db)`.
"""


# === User Authentication Dependencies ===

OptionalUser = Annotated[Optional[User], Depends(get_optional_user)]
"""
Authenticated user, or None when the request has no valid bearer token.

Product endpoints take this and decide themselves when anonymity is an
error, so resource lookup can run first.
"""


CurrentUser = Annotated[User, Depends(get_current_user)]
"""
Current authenticated user; anonymous requests get a 401 before the
endpoint body runs.
"""
