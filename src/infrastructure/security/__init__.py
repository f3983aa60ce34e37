"""Security infrastructure adapters.

- Password hashing (bcrypt)
- Access / refresh token codec (PyJWT, HS256)
- One-time token generation for password setup / reset links
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_token_codec import JWTTokenCodec
from src.infrastructure.security.one_time_token_service import OneTimeTokenService

__all__ = [
    "BcryptPasswordService",
    "JWTTokenCodec",
    "OneTimeTokenService",
]
