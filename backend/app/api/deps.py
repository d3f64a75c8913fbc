from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.db import ConnectionProvider, get_connection_provider
from app.models.user import User
from app.repositories.base import DataAccessError
from app.repositories.category_repo import CategoryRepository
from app.repositories.product_repo import ProductRepository
from app.repositories.profile_repo import ProfileRepository
from app.repositories.user_repo import UserRepository
from app.security import InvalidTokenError, decode_access_token

bearer = HTTPBearer(auto_error=False)


def get_category_repo(
    provider: ConnectionProvider = Depends(get_connection_provider),
) -> CategoryRepository:
    return CategoryRepository(provider)


def get_product_repo(
    provider: ConnectionProvider = Depends(get_connection_provider),
) -> ProductRepository:
    return ProductRepository(provider)


def get_profile_repo(
    provider: ConnectionProvider = Depends(get_connection_provider),
) -> ProfileRepository:
    return ProfileRepository(provider)


def get_user_repo(
    provider: ConnectionProvider = Depends(get_connection_provider),
) -> UserRepository:
    return UserRepository(provider)


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    users: UserRepository = Depends(get_user_repo),
) -> Optional[User]:
    """The caller when a valid bearer token is sent, otherwise None."""
    if credentials is None:
        return None
    try:
        username = decode_access_token(credentials.credentials)
    except InvalidTokenError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    try:
        user = users.get_by_username(username)
    except DataAccessError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error resolving user."
        )
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unknown user")
    return user


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin role required")
    return user
