from marketplace.core.security import (
    verify_password, get_password_hash,
    create_access_token, create_token_for_user,
    get_current_user, get_optional_user
)
from marketplace.core.dependencies import DbDependency, CurrentUser, OptionalUser


__all__ = [
    'verify_password', 'get_password_hash',
    'create_access_token', 'create_token_for_user',
    'get_current_user', 'get_optional_user',
    'DbDependency', 'CurrentUser', 'OptionalUser'
]
