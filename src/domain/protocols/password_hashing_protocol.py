"""Password hashing protocol for domain layer.

Infrastructure layer provides the concrete implementation
(BcryptPasswordService). Handlers depend only on this port.
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        def __init__(self, password_service: PasswordHashingProtocol):
            self._password_service = password_service

        password_hash = self._password_service.hash_password("Passw0rd")
        ok = self._password_service.verify_password("Passw0rd", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash.

        Returns:
            Salted hash (bcrypt format: $2b$12$...). Two calls with the same
            input produce different hashes.
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Stored hash.

        Returns:
            True if password matches hash, False otherwise. A malformed hash
            returns False instead of raising.
        """
        ...
