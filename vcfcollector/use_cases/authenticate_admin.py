"""
AuthenticateAdminUseCase - single shared-password gate for the admin view.

Exact string comparison against the configured secret. Tokens are opaque
and unique per call; they never expire and are never checked server-side.
"""

import logging
import secrets
from dataclasses import dataclass
from typing import Optional

from ..domain.entities.outcome import ResultKind

logger = logging.getLogger(__name__)


@dataclass
class AdminLoginResponse:
    kind: ResultKind
    message: str
    token: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.kind == ResultKind.OK


class AuthenticateAdminUseCase:
    def __init__(self, admin_password: str):
        self.admin_password = admin_password

    def execute(self, password: Optional[str]) -> AdminLoginResponse:
        if password is None or password != self.admin_password:
            logger.warning("[Admin] Login rejected: invalid password")
            return AdminLoginResponse(kind=ResultKind.UNAUTHORIZED, message="Invalid password")

        return AdminLoginResponse(
            kind=ResultKind.OK,
            message="Login successful",
            token=f"admin_{secrets.token_hex(16)}",
        )
