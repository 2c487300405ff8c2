"""
Course Catalog — Password hashing and JWT token issuance
"""
import time
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import jwt, JWTError
from passlib.context import CryptContext


class InvalidToken(Exception):
    """Token signature, structure or expiry check failed."""


# ─── Password Hashing ─────────────────────────────────────────────────────────

def build_password_context(rounds: int = 10) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(pwd_context: CryptContext, plain: str) -> str:
    return pwd_context.hash(plain)


def verify_password(pwd_context: CryptContext, plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


# ─── JWT Token Issuer ──────────────────────────────────────────────────────────

class TokenIssuer:
    """
    Stateless bearer tokens signed with a server-held secret.
    Nothing is persisted; rotating the secret invalidates every token.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_days: int = 7):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.lifetime = timedelta(days=expire_days)

    def issue(self, claims: dict[str, Any], issued_at: datetime | None = None) -> str:
        issued_at = issued_at or datetime.now(tz=timezone.utc)
        payload = {
            "sub": str(claims["id"]),
            "name": claims.get("name"),
            "email": claims.get("email"),
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """Decode and validate a JWT. Raises InvalidToken on failure."""
        try:
            claims = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            raise InvalidToken(str(exc)) from exc
        # jose accepts exp == now; a token is dead from its expiry second on
        if claims.get("exp", 0) <= int(time.time()):
            raise InvalidToken("Signature has expired.")
        claims["id"] = claims.get("sub")
        return claims
