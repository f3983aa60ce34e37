"""Access token guards (FastAPI dependencies).

Token extraction: `Authorization: Bearer <token>` is preferred, then the
`accessToken` cookie.

Guards:
    get_current_user: 401 unless a valid access token names a live user
    get_current_user_optional: CurrentUser or None, never raises
    require_admin: re-reads the live role (403 unless ADMIN)
    require_verified: re-reads the live verification flag (403 unless verified)

The role carried inside the access token is a hint only; authorization
decisions always consult the user record.

Usage:
    @router.get("/me")
    async def me(current_user: CurrentUser = Depends(get_current_user)):
        return {"user_id": current_user.user_id}

    @router.put("/admin/users/{user_id}/verify")
    async def verify(admin: CurrentUser = Depends(require_admin)):
        ...
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from src.core.constants import ACCESS_TOKEN_COOKIE, BEARER_PREFIX
from src.core.container import get_logger, get_token_service, get_user_repository
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.domain.protocols import TokenCodecProtocol, UserRepository


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated user attached to the request.

    Attributes:
        user_id: User's numeric identifier (`userId` claim).
        email: User's email (`email` claim).
        role: Live role read from the user record.
        is_verified: Live verification flag.
    """

    user_id: int
    email: str
    role: str
    is_verified: bool

    @property
    def is_admin(self) -> bool:
        """True for the ADMIN role."""
        return self.role == UserRole.ADMIN.value


def _auth_exception(
    code: ErrorCode,
    message: str,
    status_code: int = status.HTTP_401_UNAUTHORIZED,
) -> HTTPException:
    headers = (
        {"WWW-Authenticate": "Bearer"}
        if status_code == status.HTTP_401_UNAUTHORIZED
        else None
    )
    return HTTPException(
        status_code=status_code,
        detail={"error": message, "code": code.value},
        headers=headers,
    )


def extract_access_token(request: Request) -> str | None:
    """Access token from the Authorization header, else the cookie."""
    authorization = request.headers.get("authorization")
    if authorization and authorization.startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        if token:
            return token
    return request.cookies.get(ACCESS_TOKEN_COOKIE) or None


async def get_current_user(
    request: Request,
    token_service: Annotated[TokenCodecProtocol, Depends(get_token_service)],
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
) -> CurrentUser:
    """Authenticate the request from its access token.

    Raises:
        HTTPException 401: NO_TOKEN, TOKEN_EXPIRED, INVALID_TOKEN or
            USER_NOT_FOUND.
        HTTPException 500: AUTH_ERROR on an unexpected failure.
    """
    token = extract_access_token(request)
    if token is None:
        raise _auth_exception(ErrorCode.NO_TOKEN, "Access token required")

    try:
        if token_service.is_expired_unverified(token):
            raise _auth_exception(ErrorCode.TOKEN_EXPIRED, "Access token has expired")

        match token_service.verify_access(token):
            case Failure(error=token_error):
                if token_error.is_expired:
                    raise _auth_exception(
                        ErrorCode.TOKEN_EXPIRED, "Access token has expired"
                    )
                raise _auth_exception(ErrorCode.INVALID_TOKEN, "Invalid access token")
            case Success(value=claims):
                user = await user_repo.find_by_id(claims.user_id)

        if user is None:
            raise _auth_exception(ErrorCode.USER_NOT_FOUND, "User not found")

        return CurrentUser(
            user_id=user.id,
            email=user.email,
            role=user.role.value,
            is_verified=user.is_verified,
        )
    except HTTPException:
        raise
    except Exception as e:
        get_logger().error("auth_guard_failed", error=e)
        raise _auth_exception(
            ErrorCode.AUTH_ERROR,
            "Authentication error",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        ) from e


async def get_current_user_optional(
    request: Request,
    token_service: Annotated[TokenCodecProtocol, Depends(get_token_service)],
) -> CurrentUser | None:
    """Identity from a valid access token, None otherwise.

    Does not touch the database: the role is the token hint and
    is_verified is reported False (unknown), so never use this for
    authorization.
    """
    token = extract_access_token(request)
    if token is None:
        return None

    verification = token_service.verify_safe(token)
    if not verification.valid or verification.claims is None:
        return None

    claims = verification.claims
    return CurrentUser(
        user_id=claims.user_id,
        email=claims.email,
        role=claims.role or UserRole.USER.value,
        is_verified=False,
    )


async def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
) -> CurrentUser:
    """Require the ADMIN role on the live user record.

    Raises:
        HTTPException 401: USER_NOT_FOUND if the user vanished.
        HTTPException 403: INSUFFICIENT_PERMISSIONS.
    """
    role = await user_repo.get_role(current_user.user_id)
    if role is None:
        raise _auth_exception(ErrorCode.USER_NOT_FOUND, "User not found")
    if role != UserRole.ADMIN:
        get_logger().warning(
            "admin_access_denied", user_id=current_user.user_id
        )
        raise _auth_exception(
            ErrorCode.INSUFFICIENT_PERMISSIONS,
            "Insufficient permissions",
            status.HTTP_403_FORBIDDEN,
        )
    return current_user


async def require_verified(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
) -> CurrentUser:
    """Require a verified account (live check).

    Raises:
        HTTPException 401: USER_NOT_FOUND if the user vanished.
        HTTPException 403: EMAIL_NOT_VERIFIED.
    """
    user = await user_repo.find_by_id(current_user.user_id)
    if user is None:
        raise _auth_exception(ErrorCode.USER_NOT_FOUND, "User not found")
    if not user.is_verified:
        raise _auth_exception(
            ErrorCode.EMAIL_NOT_VERIFIED,
            "Account not verified",
            status.HTTP_403_FORBIDDEN,
        )
    return current_user
