"""Password hashing utilities.

Learn: Uses bcrypt for password hashing. bcrypt salts automatically and
produces hashes starting with "$2b$". The work factor is configurable so
tests can use a cheap one; production keeps the default of 12.
Passwords are truncated to 72 bytes (bcrypt's limit).
"""

import bcrypt


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt."""
    pw_bytes = password.encode("utf-8")[:72]
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its bcrypt hash."""
    try:
        pw_bytes = password.encode("utf-8")[:72]
        return bcrypt.checkpw(pw_bytes, password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False
