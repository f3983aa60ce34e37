"""Application services (logic shared by several handlers)."""

from src.application.services.one_time_token_issuer import OneTimeTokenIssuer
from src.application.services.password_token_redeemer import PasswordTokenRedeemer

__all__ = ["OneTimeTokenIssuer", "PasswordTokenRedeemer"]
