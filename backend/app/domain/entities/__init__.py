from .user import MAX_SCORE, User
from .user_query import SortOrder, UserPage, UserQuery, UserSortField, total_pages

__all__ = [
    "MAX_SCORE",
    "User",
    "UserQuery",
    "UserPage",
    "UserSortField",
    "SortOrder",
    "total_pages",
]
