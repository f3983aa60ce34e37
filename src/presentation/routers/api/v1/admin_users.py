"""Admin users router.

Endpoints:
    PUT /admin/users/{user_id}/verify - Verify user, send password setup email
    GET /admin/users/{user_id}        - User profile

Every endpoint requires the ADMIN role on the live user record.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse

from src.application.commands import VerifyUser
from src.application.commands.handlers.verify_user_handler import VerifyUserHandler
from src.application.queries import GetCurrentUser
from src.application.queries.handlers.get_current_user_handler import (
    GetCurrentUserHandler,
)
from src.core.container import get_current_user_handler, get_logger, get_verify_user_handler
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    require_admin,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.auth_schemas import UserEnvelope, UserResponse, VerifyUserResponse
from src.schemas.common_schemas import ErrorResponse

router = APIRouter(prefix="/admin/users", tags=["Admin"])

_ADMIN_RESPONSES: dict[int | str, dict[str, object]] = {
    401: {"description": "Not authenticated", "model": ErrorResponse},
    403: {"description": "Admin role required", "model": ErrorResponse},
    404: {"description": "User not found", "model": ErrorResponse},
}


@router.put(
    "/{user_id}/verify",
    response_model=VerifyUserResponse,
    responses={
        **_ADMIN_RESPONSES,
        500: {"description": "Verified but setup email failed", "model": ErrorResponse},
    },
    summary="Verify user",
    description="Mark the user verified and email a 24h password setup link.",
)
async def verify_user(
    admin: Annotated[CurrentUser, Depends(require_admin)],
    user_id: Annotated[int, Path(description="User ID")],
    handler: VerifyUserHandler = Depends(get_verify_user_handler),
) -> VerifyUserResponse | JSONResponse:
    """Verify a user.

    PUT /admin/users/{user_id}/verify → 200 OK

    The verification is kept when the email fails; the 500 body carries the
    verified user so the administrator can retry delivery.
    """
    result = await handler.handle(VerifyUser(user_id=user_id))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
        case Success(value=outcome):
            user = UserResponse.from_dto(outcome.user)
            get_logger().info(
                "admin_verified_user",
                admin_id=admin.user_id,
                user_id=user_id,
                email_sent=outcome.email_sent,
            )
            if not outcome.email_sent:
                return JSONResponse(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    content={
                        "error": "User verified but failed to send password setup email",
                        "code": ErrorCode.EMAIL_SEND_FAILED.value,
                        "user": user.model_dump(mode="json", by_alias=True),
                    },
                )
            return VerifyUserResponse(user=user)


@router.get(
    "/{user_id}",
    response_model=UserEnvelope,
    responses=_ADMIN_RESPONSES,
    summary="Get user",
)
async def get_user(
    admin: Annotated[CurrentUser, Depends(require_admin)],
    user_id: Annotated[int, Path(description="User ID")],
    handler: GetCurrentUserHandler = Depends(get_current_user_handler),
) -> UserEnvelope | JSONResponse:
    """Return a user's safe profile."""
    result = await handler.handle(GetCurrentUser(user_id=user_id))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
        case Success(value=profile):
            return UserEnvelope(user=UserResponse.from_dto(profile))
