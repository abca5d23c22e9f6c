"""
Security Utilities

Password hashing and JWT token management.

Password Hashing:
=================
bcrypt through passlib. The cost factor is ``PASSWORD_HASH_ROUNDS`` (5 by
default, the value existing accounts were hashed with); AuthService passes
its own settings value per call. It is far below bcrypt's usual 12;
raising it only affects newly hashed passwords.

JWT Tokens:
===========
PyJWT, HS256. Tokens carry ``{"id": <user id>}``. An expiry claim is only
added when an ``expires_delta`` is passed; by default tokens never expire.

Usage:
======
    from brainvault.shared.utils.security import SecurityUtils

    hashed = SecurityUtils.hash_password("Abcdef1!")
    SecurityUtils.verify_password("Abcdef1!", hashed)  # True

    token = SecurityUtils.create_access_token({"id": str(user.id)}, "secret")
    payload = SecurityUtils.decode_access_token(token, "secret")
"""

import secrets
import string
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

import jwt
from passlib.context import CryptContext

from brainvault.config.settings import settings


# Password hashing configuration
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.PASSWORD_HASH_ROUNDS,
)


@lru_cache(maxsize=8)
def _context_with_rounds(rounds: int) -> CryptContext:
    return pwd_context.copy(bcrypt__rounds=rounds)


SHARE_HASH_ALPHABET = string.ascii_letters + string.digits


class SecurityUtils:
    """
    Security utilities for authentication and sharing.

    Provides:
    - Password hashing with bcrypt
    - JWT token creation and validation
    - Random share hashes
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORD HASHING
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str, rounds: Optional[int] = None) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password
            rounds: Cost factor; defaults to the process settings

        Returns:
            Bcrypt hash string (includes salt and cost factor)
        """
        if rounds is None:
            return pwd_context.hash(password)
        return _context_with_rounds(rounds).hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """
        Verify password against bcrypt hash.

        Args:
            plain_password: Plain text password to verify
            hashed_password: Bcrypt hash to verify against

        Returns:
            True if password matches, False otherwise (including when the
            stored hash is not a recognizable bcrypt hash)
        """
        try:
            return pwd_context.verify(plain_password, hashed_password)
        except ValueError:
            return False

    # ═══════════════════════════════════════════════════════════════════════════
    # JWT TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create JWT access token.

        Args:
            data: Payload data to encode (``{"id": user_id}``)
            secret_key: Secret key for signing
            expires_delta: Token lifetime; None means no ``exp`` claim
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)

        to_encode["iat"] = now
        if expires_delta is not None:
            to_encode["exp"] = now + expires_delta

        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify JWT token.

        Args:
            token: JWT token string
            secret_key: Secret key used for signing
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Decoded token payload

        Raises:
            ValueError: If token is expired or invalid
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
            )
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")

    # ═══════════════════════════════════════════════════════════════════════════
    # SHARE HASHES
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def generate_share_hash(length: int = 10) -> str:
        """Random alphanumeric string used as a public share capability."""
        return "".join(secrets.choice(SHARE_HASH_ALPHABET) for _ in range(length))
