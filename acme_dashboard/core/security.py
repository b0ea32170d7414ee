"""Password hashing utilities using bcrypt."""

import bcrypt

BCRYPT_ROUNDS = 10


def hash_password(plain: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a password using bcrypt."""
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Verify a password against its hash."""
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Malformed hash
        return False
