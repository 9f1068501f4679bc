"""User API routes."""

from fastapi import APIRouter, Depends, Query

from user_search.models.user import UserResponse
from user_search.services import get_user_search_service
from user_search_common.models.page import PageRequest
from user_search_common.services.user_service import UserSearchService

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)


@router.get("", response_model=list[UserResponse])
@router.get("/", response_model=list[UserResponse], include_in_schema=False)
def search_users(
    name: str | None = Query(None, description="Exact name to match"),
    page: int = Query(0, description="Zero-based page index, 0 to 2147483647"),
    size: int = Query(10, description="Page size, 1 to 2147483647"),
    service: UserSearchService = Depends(get_user_search_service),
) -> list[UserResponse]:
    """Search users by name, one page at a time.

    Omitting ``name`` returns every user within the page window. Out-of-range
    ``page`` or ``size`` values are rejected by ``PageRequest`` with a 422.
    """
    users = service.search_by_name(name, PageRequest.of(page, size))
    return [UserResponse.model_validate(user) for user in users]
