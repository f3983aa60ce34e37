"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt with a configurable cost
factor (BCRYPT_ROUNDS, default 12).

Security:
    - Random salt per hash (same password, different hashes)
    - bcrypt.checkpw compares in constant time
    - Cost factor is logarithmic: each +1 doubles computation time
      (10 = ~60ms, 12 = ~250ms, 14 = ~1000ms)
"""

import bcrypt

from src.core.constants import BCRYPT_ROUNDS_DEFAULT


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("Passw0rd")
        is_valid = password_service.verify_password("Passw0rd", password_hash)
    """

    def __init__(self, cost_factor: int = BCRYPT_ROUNDS_DEFAULT) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (10-20).

        Raises:
            ValueError: If cost_factor is outside 10-20.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Returns:
            60-character bcrypt hash ($2b$<cost>$<salt><hash>).

        Example:
            >>> service = BcryptPasswordService(cost_factor=10)
            >>> service.hash_password("Passw0rd") != service.hash_password("Passw0rd")
            True
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns False (never raises) for a malformed or non-bcrypt hash.

        Example:
            >>> service.verify_password("Passw0rd", "invalid_hash")
            False
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            # Invalid hash format or encoding error
            return False
