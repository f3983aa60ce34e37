"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (RegisterUser, ResetPassword).

Each command has a corresponding handler in commands/handlers/.
"""

from src.application.commands.admin_commands import VerifyUser
from src.application.commands.auth_commands import (
    LoginUser,
    LogoutAllSessions,
    LogoutUser,
    RefreshAccessToken,
    RegisterUser,
    RequestPasswordReset,
    ResetPassword,
    SetupPassword,
)

__all__ = [
    # Auth commands
    "LoginUser",
    "LogoutAllSessions",
    "LogoutUser",
    "RefreshAccessToken",
    "RegisterUser",
    "RequestPasswordReset",
    "ResetPassword",
    "SetupPassword",
    # Admin commands
    "VerifyUser",
]
