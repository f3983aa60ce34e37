"""JWT token codec (adapter).

Implements TokenCodecProtocol using PyJWT with HMAC-SHA256.

Security:
    - HS256 with two independent secrets (access, refresh), each >= 256 bits
    - Issuer and audience are issued and required on verification
    - Refresh tokens carry the ledger record id (`tokenId`) and a unique
      `jti`, so two refresh tokens minted in the same second still differ

Wire Claims:
    access:  userId, email, role, iat, exp, iss, aud
    refresh: userId, email, tokenId, jti, iat, exp, iss, aud

Error Mapping (PyJWT exception -> TokenErrorKind):
    ExpiredSignatureError    -> EXPIRED
    ImmatureSignatureError   -> NOT_YET_VALID
    InvalidSignatureError    -> VERIFICATION_FAILED
    DecodeError              -> MALFORMED
    MissingRequiredClaimError-> MALFORMED
    other InvalidTokenError  -> VERIFICATION_FAILED (issuer, audience, ...)
"""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt.exceptions import (
    DecodeError,
    ExpiredSignatureError,
    ImmatureSignatureError,
    InvalidSignatureError,
    InvalidTokenError,
    MissingRequiredClaimError,
)
from uuid_extensions import uuid7

from src.core.constants import MIN_SECRET_BYTES
from src.core.result import Failure, Result, Success
from src.domain.errors import TokenError, TokenErrorKind
from src.domain.value_objects import (
    RefreshTokenClaims,
    TokenClaims,
    TokenVerification,
)

_ALGORITHM = "HS256"
_REQUIRED_CLAIMS = ["exp", "iat", "iss", "aud"]


class JWTTokenCodec:
    """Access and refresh token codec.

    Usage:
        from src.core.container import get_token_service

        codec = get_token_service()
        access_token = codec.issue_access(user.id, user.email, user.role.value)

        match codec.verify_access(access_token):
            case Success(value=claims):
                user_id = claims.user_id
            case Failure(error=error):
                ...
    """

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        access_ttl: timedelta = timedelta(minutes=15),
        refresh_ttl: timedelta = timedelta(days=7),
        issuer: str = "find-a-company-api",
        audience: str = "find-a-company-client",
    ) -> None:
        """Initialize JWT codec.

        Args:
            access_secret: HMAC secret for access tokens.
            refresh_secret: HMAC secret for refresh tokens.
            access_ttl: Access token lifetime.
            refresh_ttl: Refresh token lifetime.
            issuer: `iss` claim value.
            audience: `aud` claim value.

        Raises:
            ValueError: If a secret is shorter than 32 bytes, or both
                secrets are equal.
        """
        for secret in (access_secret, refresh_secret):
            if len(secret.encode("utf-8")) < MIN_SECRET_BYTES:
                msg = "JWT secret key must be at least 32 bytes (256 bits)"
                raise ValueError(msg)
        if access_secret == refresh_secret:
            msg = "Access and refresh token secrets must differ"
            raise ValueError(msg)

        self._access_secret = access_secret
        self._refresh_secret = refresh_secret
        self._access_ttl = access_ttl
        self._refresh_ttl = refresh_ttl
        self._issuer = issuer
        self._audience = audience

    @property
    def refresh_ttl(self) -> timedelta:
        """Refresh token lifetime (also the ledger record lifetime)."""
        return self._refresh_ttl

    # ------------------------------------------------------------------
    # Issuing
    # ------------------------------------------------------------------

    def issue_access(self, user_id: int, email: str, role: str = "USER") -> str:
        """Mint an access token.

        Example:
            >>> token = codec.issue_access(1, "a@x.com", "ADMIN")
            >>> len(token.split("."))
            3
        """
        payload = self._base_payload(user_id, email, self._access_ttl)
        payload["role"] = role
        token: str = jwt.encode(payload, self._access_secret, algorithm=_ALGORITHM)
        return token

    def issue_refresh(self, user_id: int, email: str, token_id: int) -> str:
        """Mint a refresh token bound to ledger record `token_id`."""
        payload = self._base_payload(user_id, email, self._refresh_ttl)
        payload["tokenId"] = token_id
        payload["jti"] = uuid7().hex
        token: str = jwt.encode(payload, self._refresh_secret, algorithm=_ALGORITHM)
        return token

    def _base_payload(
        self, user_id: int, email: str, ttl: timedelta
    ) -> dict[str, Any]:
        now = datetime.now(UTC)
        return {
            "userId": user_id,
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
            "iss": self._issuer,
            "aud": self._audience,
        }

    # ------------------------------------------------------------------
    # Verification
    # ------------------------------------------------------------------

    def verify_access(self, token: str) -> Result[TokenClaims, TokenError]:
        """Verify an access token.

        Returns:
            Success(TokenClaims) or Failure(TokenError) with the kind of
            failure (EXPIRED, MALFORMED, NOT_YET_VALID, VERIFICATION_FAILED).
        """
        match self._decode(token, self._access_secret, label="access"):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=payload):
                pass

        user_id = payload.get("userId")
        email = payload.get("email")
        if not _is_int(user_id) or not isinstance(email, str) or not email:
            return Failure(error=_malformed("access"))

        role = payload.get("role")
        return Success(
            value=TokenClaims(
                user_id=user_id,
                email=email,
                issued_at=datetime.fromtimestamp(payload["iat"], UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
                role=role if isinstance(role, str) else None,
            )
        )

    def verify_refresh(self, token: str) -> Result[RefreshTokenClaims, TokenError]:
        """Verify a refresh token.

        A refresh token without a numeric `tokenId` is MALFORMED.
        """
        match self._decode(token, self._refresh_secret, label="refresh"):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=payload):
                pass

        user_id = payload.get("userId")
        email = payload.get("email")
        token_id = payload.get("tokenId")
        if (
            not _is_int(user_id)
            or not isinstance(email, str)
            or not email
            or not _is_int(token_id)
        ):
            return Failure(error=_malformed("refresh"))

        jti = payload.get("jti")
        return Success(
            value=RefreshTokenClaims(
                user_id=user_id,
                email=email,
                token_id=token_id,
                jti=jti if isinstance(jti, str) else "",
                issued_at=datetime.fromtimestamp(payload["iat"], UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            )
        )

    def verify_safe(self, token: str) -> TokenVerification:
        """Verify an access token without raising.

        Example:
            >>> codec.verify_safe("garbage").valid
            False
        """
        match self.verify_access(token):
            case Success(value=claims):
                return TokenVerification(valid=True, claims=claims)
            case Failure(error=error):
                return TokenVerification(valid=False, error_kind=error.kind)

    def peek_expiry(self, token: str) -> datetime | None:
        """Read the `exp` claim without verifying the signature.

        Never use the result for an authorization decision; it only lets
        callers reject obviously stale tokens before doing real work.
        """
        try:
            payload = jwt.decode(
                token,
                options={"verify_signature": False},
                algorithms=[_ALGORITHM],
            )
        except (InvalidTokenError, TypeError, ValueError):
            return None

        exp = payload.get("exp")
        if not isinstance(exp, (int, float)) or isinstance(exp, bool):
            return None
        try:
            return datetime.fromtimestamp(exp, UTC)
        except (OverflowError, OSError, ValueError):
            return None

    def is_expired_unverified(self, token: str) -> bool:
        """True when the token is past `exp`, or `exp` cannot be read."""
        expires_at = self.peek_expiry(token)
        if expires_at is None:
            return True
        return expires_at <= datetime.now(UTC)

    def _decode(
        self, token: str, secret: str, *, label: str
    ) -> Result[dict[str, Any], TokenError]:
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                secret,
                algorithms=[_ALGORITHM],
                issuer=self._issuer,
                audience=self._audience,
                options={"require": _REQUIRED_CLAIMS},
            )
            return Success(value=payload)
        except ExpiredSignatureError:
            return Failure(
                error=TokenError(
                    kind=TokenErrorKind.EXPIRED,
                    message=f"{label.capitalize()} token has expired",
                )
            )
        except ImmatureSignatureError:
            return Failure(
                error=TokenError(
                    kind=TokenErrorKind.NOT_YET_VALID,
                    message="Token not active yet",
                )
            )
        except InvalidSignatureError:
            return Failure(error=_verification_failed())
        except (DecodeError, MissingRequiredClaimError):
            return Failure(error=_malformed(label))
        except (InvalidTokenError, TypeError, ValueError):
            # Issuer, audience and any other claim check
            return Failure(error=_verification_failed())


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _malformed(label: str) -> TokenError:
    return TokenError(
        kind=TokenErrorKind.MALFORMED,
        message=f"Invalid {label} token",
    )


def _verification_failed() -> TokenError:
    return TokenError(
        kind=TokenErrorKind.VERIFICATION_FAILED,
        message="Token verification failed",
    )
