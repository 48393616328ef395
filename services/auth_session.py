# services/auth_session.py
from dataclasses import dataclass
from typing import Optional


@dataclass
class AuthSession:
    """Holds the bearer token of the signed-in user, if any."""
    token: Optional[str] = None
    user_type: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def sign_out(self) -> None:
        self.token, self.user_type = None, None
