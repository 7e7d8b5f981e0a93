"""Password hashing."""

from passlib.context import CryptContext

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72

# Password hashing context; over-long passwords raise instead of being truncated
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__truncate_error=True)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Passwords longer than bcrypt can hash never match, so a stored hash
    cannot be satisfied by its prefix plus arbitrary trailing bytes.
    """
    if len(plain_password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password. Raises PasswordTruncateError past BCRYPT_MAX_BYTES."""
    return pwd_context.hash(password)
