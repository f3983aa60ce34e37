"""Auth router.

Endpoints:
    POST /auth/register         - Register (unverified, no password)
    POST /auth/login            - Login (access token in body, refresh cookie)
    POST /auth/refresh          - Rotate refresh token, new access token
    POST /auth/logout           - Revoke one session (never fails)
    POST /auth/logout-all       - Revoke every session of the caller
    GET  /auth/me               - Current user profile
    POST /auth/setup-password   - Set first password with setup token
    POST /auth/forgot-password  - Request reset email (always 200)
    POST /auth/reset-password   - Reset password with reset token

Routes only translate HTTP to commands and Results to responses; all
business rules live in the handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Header, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands import (
    LoginUser,
    LogoutAllSessions,
    LogoutUser,
    RefreshAccessToken,
    RegisterUser,
    RequestPasswordReset,
    ResetPassword,
    SetupPassword,
)
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.logout_all_sessions_handler import (
    LogoutAllSessionsHandler,
)
from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
from src.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from src.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from src.application.commands.handlers.setup_password_handler import (
    SetupPasswordHandler,
)
from src.application.queries import GetCurrentUser
from src.application.queries.handlers.get_current_user_handler import (
    GetCurrentUserHandler,
)
from src.core.constants import (
    FORGOT_PASSWORD_MESSAGE,
    REFRESH_TOKEN_COOKIE,
    UNKNOWN_CLIENT,
)
from src.core.container import (
    get_current_user_handler,
    get_login_user_handler,
    get_logout_all_sessions_handler,
    get_logout_user_handler,
    get_rate_limit,
    get_refresh_token_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
    get_reset_password_handler,
    get_setup_password_handler,
)
from src.core.result import Failure, Success
from src.domain.protocols import RateLimitProtocol
from src.domain.validators import normalize_email
from src.infrastructure.rate_limit.config import (
    FORGOT_PASSWORD_RULE,
    LOGIN_RULE,
    REFRESH_RULE,
    REGISTER_RULE,
    RESET_PASSWORD_RULE,
)
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from src.presentation.routers.api.middleware.rate_limit_dependencies import (
    enforce_rate_limit,
)
from src.presentation.routers.api.middleware.request_context import (
    get_client_ip,
    get_user_agent,
)
from src.presentation.routers.api.v1.auth_cookies import (
    clear_auth_cookies,
    set_refresh_cookie,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.auth_schemas import (
    AccessTokenResponse,
    ForgotPasswordRequest,
    LoginRequest,
    LogoutRequest,
    PasswordTokenRequest,
    RegisterRequest,
    RegisterResponse,
    UserEnvelope,
    UserResponse,
)
from src.schemas.common_schemas import ErrorResponse, MessageResponse

router = APIRouter(prefix="/auth", tags=["Auth"])

RateLimit = Annotated[RateLimitProtocol, Depends(get_rate_limit)]

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"description": "Validation failed", "model": ErrorResponse},
    429: {"description": "Rate limit exceeded", "model": ErrorResponse},
}


def _email_key(email: str | None) -> str:
    return normalize_email(email) if email else UNKNOWN_CLIENT


# =============================================================================
# Registration
# =============================================================================


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterResponse,
    responses=_ERROR_RESPONSES,
    summary="Register",
    description="Create an unverified account without a password.",
)
async def register(
    request: Request,
    data: RegisterRequest,
    rate_limit: RateLimit,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> RegisterResponse | JSONResponse:
    """Register a new user.

    POST /auth/register → 201 Created
    """
    await enforce_rate_limit(rate_limit, REGISTER_RULE, get_client_ip(request))

    result = await handler.handle(RegisterUser(email=data.email, name=data.name))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
        case Success(value=profile):
            return RegisterResponse(user=UserResponse.from_dto(profile))


# =============================================================================
# Sessions
# =============================================================================


@router.post(
    "/login",
    response_model=AccessTokenResponse,
    responses={
        **_ERROR_RESPONSES,
        401: {"description": "Invalid credentials", "model": ErrorResponse},
        403: {"description": "Not verified or no password", "model": ErrorResponse},
    },
    summary="Login",
    description="Verify credentials; the refresh token is set as an HttpOnly cookie.",
)
async def login(
    request: Request,
    response: Response,
    data: LoginRequest,
    rate_limit: RateLimit,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> AccessTokenResponse | JSONResponse:
    """Login.

    POST /auth/login → 200 OK
    """
    ip_address = get_client_ip(request)
    await enforce_rate_limit(rate_limit, LOGIN_RULE, ip_address, _email_key(data.email))

    result = await handler.handle(
        LoginUser(
            email=data.email,
            password=data.password,
            ip_address=ip_address,
            user_agent=get_user_agent(request),
        )
    )

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
        case Success(value=tokens):
            set_refresh_cookie(response, tokens.refresh_token)
            return AccessTokenResponse(
                message="Login successful",
                access_token=tokens.access_token,
            )


@router.post(
    "/refresh",
    response_model=AccessTokenResponse,
    responses={
        401: {"description": "Refresh token rejected", "model": ErrorResponse},
        429: {"description": "Rate limit exceeded", "model": ErrorResponse},
    },
    summary="Refresh",
    description="Rotate the refresh token cookie and mint a new access token.",
)
async def refresh(
    request: Request,
    response: Response,
    rate_limit: RateLimit,
    handler: RefreshAccessTokenHandler = Depends(get_refresh_token_handler),
) -> AccessTokenResponse | JSONResponse:
    """Refresh tokens.

    POST /auth/refresh → 200 OK
    """
    ip_address = get_client_ip(request)
    await enforce_rate_limit(rate_limit, REFRESH_RULE, ip_address)

    result = await handler.handle(
        RefreshAccessToken(
            refresh_token=request.cookies.get(REFRESH_TOKEN_COOKIE),
            ip_address=ip_address,
            user_agent=get_user_agent(request),
        )
    )

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
        case Success(value=tokens):
            set_refresh_cookie(response, tokens.refresh_token)
            return AccessTokenResponse(
                message="Token refreshed successfully",
                access_token=tokens.access_token,
            )


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Logout",
    description="Revoke the presented refresh token (if any) and clear cookies.",
)
async def logout(
    request: Request,
    response: Response,
    data: LogoutRequest | None = None,
    x_refresh_token: Annotated[str | None, Header()] = None,
    handler: LogoutUserHandler = Depends(get_logout_user_handler),
) -> MessageResponse:
    """Logout (best effort, never fails).

    Refresh token precedence: body `refreshToken`, cookie, X-Refresh-Token.
    """
    refresh_token = (
        (data.refresh_token if data else None)
        or request.cookies.get(REFRESH_TOKEN_COOKIE)
        or x_refresh_token
    )
    await handler.handle(LogoutUser(refresh_token=refresh_token))

    clear_auth_cookies(response)
    return MessageResponse(message="Logged out successfully")


@router.post(
    "/logout-all",
    response_model=MessageResponse,
    responses={401: {"description": "Not authenticated", "model": ErrorResponse}},
    summary="Logout everywhere",
    description="Revoke every refresh token of the authenticated user.",
)
async def logout_all(
    response: Response,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    handler: LogoutAllSessionsHandler = Depends(get_logout_all_sessions_handler),
) -> MessageResponse:
    """Logout from all devices.

    POST /auth/logout-all → 200 OK
    """
    await handler.handle(LogoutAllSessions(user_id=current_user.user_id))

    clear_auth_cookies(response)
    return MessageResponse(message="Logged out from all devices successfully")


@router.get(
    "/me",
    response_model=UserEnvelope,
    responses={401: {"description": "Not authenticated", "model": ErrorResponse}},
    summary="Current user",
)
async def me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    handler: GetCurrentUserHandler = Depends(get_current_user_handler),
) -> UserEnvelope | JSONResponse:
    """Return the authenticated user's profile."""
    result = await handler.handle(GetCurrentUser(user_id=current_user.user_id))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
        case Success(value=profile):
            return UserEnvelope(user=UserResponse.from_dto(profile))


# =============================================================================
# Password setup / reset
# =============================================================================


@router.post(
    "/setup-password",
    response_model=MessageResponse,
    responses={400: {"description": "Invalid request or token", "model": ErrorResponse}},
    summary="Set up password",
)
async def setup_password(
    data: PasswordTokenRequest,
    handler: SetupPasswordHandler = Depends(get_setup_password_handler),
) -> MessageResponse | JSONResponse:
    """Set the first password with the emailed setup token."""
    result = await handler.handle(SetupPassword(token=data.token, password=data.password))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
        case Success():
            return MessageResponse(
                message="Password set up successfully. You can now login."
            )


@router.post(
    "/forgot-password",
    response_model=MessageResponse,
    responses=_ERROR_RESPONSES,
    summary="Forgot password",
    description="Always answers with the same message, whether or not the email exists.",
)
async def forgot_password(
    request: Request,
    data: ForgotPasswordRequest,
    rate_limit: RateLimit,
    handler: RequestPasswordResetHandler = Depends(get_request_password_reset_handler),
) -> MessageResponse | JSONResponse:
    """Request a password reset email."""
    await enforce_rate_limit(
        rate_limit,
        FORGOT_PASSWORD_RULE,
        get_client_ip(request),
        _email_key(data.email),
    )

    result = await handler.handle(RequestPasswordReset(email=data.email))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
        case Success():
            return MessageResponse(message=FORGOT_PASSWORD_MESSAGE)


@router.post(
    "/reset-password",
    response_model=MessageResponse,
    responses=_ERROR_RESPONSES,
    summary="Reset password",
    description="Replace the password and revoke every session of the user.",
)
async def reset_password(
    request: Request,
    data: PasswordTokenRequest,
    rate_limit: RateLimit,
    handler: ResetPasswordHandler = Depends(get_reset_password_handler),
) -> MessageResponse | JSONResponse:
    """Reset password with the emailed reset token."""
    await enforce_rate_limit(rate_limit, RESET_PASSWORD_RULE, get_client_ip(request))

    result = await handler.handle(ResetPassword(token=data.token, password=data.password))

    match result:
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
        case Success():
            return MessageResponse(
                message="Password reset successfully. Please login with your new password."
            )
