"""
Quora Backend — Admin Route Handlers
======================================

What:  DELETE /admin/user/{userId}. Admin role required.
"""

from fastapi import APIRouter, Depends

from quora.dependencies import get_access_token, get_admin_service
from quora.schemas.common import ErrorResponse
from quora.schemas.user import UserDeleteResponse
from quora.services.admin_service import AdminService

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.delete(
    "/user/{user_id}",
    response_model=UserDeleteResponse,
    responses={
        403: {"description": "Not signed in or not an admin", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
    },
    summary="Delete a user and all their content",
)
async def delete_user(
    user_id: str,
    access_token: str = Depends(get_access_token),
    admin_service: AdminService = Depends(get_admin_service),
) -> UserDeleteResponse:
    deleted = await admin_service.delete_user(user_id, access_token)
    return UserDeleteResponse(id=deleted.uuid)
