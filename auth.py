"""Admin gate strategies.

The admin view only asks `check_password(candidate)`. Which strategy answers
is injected, so the demo constant can be swapped without touching callers.
"""

import hmac
import logging

from passlib.context import CryptContext

from config import ADMIN_PASSWORD
from errors import AuthFailure

LOGGER = logging.getLogger(__name__)

# pbkdf2_sha256 avoids depending on a working bcrypt backend
pwd_ctx = CryptContext(schemes=["pbkdf2_sha256"], default="pbkdf2_sha256")


class ConstantPasswordAuth:
    """Compares against a fixed constant. Trivially bypassable, demo only."""

    def __init__(self, password=ADMIN_PASSWORD):
        self._password = password

    def check_password(self, candidate):
        if candidate is None:
            return False
        return hmac.compare_digest(str(candidate).encode(), self._password.encode())


class HashedPasswordAuth:
    """Verifies against a passlib hash instead of keeping the plain password."""

    def __init__(self, password_hash):
        self._hash = password_hash

    @classmethod
    def from_password(cls, password):
        return cls(pwd_ctx.hash(password))

    def check_password(self, candidate):
        if not candidate or not isinstance(candidate, (str, bytes)):
            return False
        try:
            return pwd_ctx.verify(candidate, self._hash)
        except (TypeError, ValueError):
            LOGGER.warning("Stored admin hash is not recognised")
            return False


def require_admin(auth, candidate):
    if not auth.check_password(candidate):
        raise AuthFailure("Wrong password")
