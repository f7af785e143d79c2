"""User CRUD endpoints.

Bodies and query strings are read raw and handed to the validation layer,
so every failure is reported through the domain error taxonomy.
"""

import json
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status

from app.application.schemas import (
    PaginationResponse,
    UserListResponse,
    UserResponse,
)
from app.application.services import UserService
from app.application.validation import (
    parse_create_payload,
    parse_list_query,
    parse_update_payload,
    parse_user_id,
)
from app.domain.exceptions import MalformedRequestError
from app.infrastructure.dependencies import get_user_service

router = APIRouter(prefix="/users", tags=["Users"])


async def _read_json(request: Request) -> Any:
    """Decode the request body as JSON whatever the declared content type."""
    body = await request.body()
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise MalformedRequestError() from None


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: Request,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a new user."""
    data = parse_create_payload(await _read_json(request))
    user = await service.create_user(data)
    return UserResponse.model_validate(user, from_attributes=True)


@router.get("", response_model=UserListResponse)
async def list_users(
    request: Request,
    service: UserService = Depends(get_user_service),
) -> UserListResponse:
    """Retrieve a filtered, sorted, paginated list of users."""
    query = parse_list_query(dict(request.query_params))
    page = await service.list_users(query)
    return UserListResponse(
        data=[UserResponse.model_validate(u, from_attributes=True) for u in page.items],
        pagination=PaginationResponse(
            total=page.total,
            page=page.page,
            limit=page.limit,
            total_pages=page.total_pages,
        ),
    )


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Retrieve a single user by ID."""
    user = await service.get_user(parse_user_id(user_id))
    return UserResponse.model_validate(user, from_attributes=True)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    request: Request,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Update an existing user with the fields present in the body."""
    canonical_id = parse_user_id(user_id)
    data = parse_update_payload(await _read_json(request))
    user = await service.update_user(canonical_id, data)
    return UserResponse.model_validate(user, from_attributes=True)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Delete a user by ID."""
    await service.delete_user(parse_user_id(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
