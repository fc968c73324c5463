"""User endpoints."""

from fastapi import APIRouter, status

from lms.api.dependencies import RepositoryDep
from lms.api.models import (
    UserCreate,
    UserCreateResponse,
    UserDetail,
    UserListResponse,
    parse_path_id,
    user_to_detail,
    user_to_list_item,
    user_to_summary,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserCreateResponse, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, repository: RepositoryDep) -> UserCreateResponse:
    """Create a new user."""
    # An explicit null role is invalid; only an omitted role falls back to the default
    extra = {"role": payload.role} if "role" in payload.model_fields_set else {}
    user = repository.create_user(name=payload.name, email=payload.email, **extra)
    return UserCreateResponse(message="User created successfully", user=user_to_summary(user))


@router.get("", response_model=UserListResponse)
def list_users(repository: RepositoryDep) -> UserListResponse:
    """List all users."""
    users = repository.list_users()
    return UserListResponse(users=[user_to_list_item(u) for u in users], total=len(users))


@router.get("/{user_id}", response_model=UserDetail)
def get_user(user_id: str, repository: RepositoryDep) -> UserDetail:
    """Get a user by ID."""
    user = repository.get_user(parse_path_id(user_id))
    return user_to_detail(user)
