"""One-time token slots held on the user record."""

from enum import Enum


class OneTimeTokenKind(str, Enum):
    """Independent one-time token slots.

    SETUP and RESET tokens may be outstanding at the same time; consuming
    or expiring one never touches the other.
    """

    SETUP = "setup"  # admin-initiated, 24h
    RESET = "reset"  # self-service, 1h
