from .user import (
    PaginationResponse,
    UserCreate,
    UserListQuery,
    UserListResponse,
    UserResponse,
    UserUpdate,
)

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserListQuery",
    "UserResponse",
    "PaginationResponse",
    "UserListResponse",
]
