"""Password hashing utilities."""

from passlib.context import CryptContext

# bcrypt_sha256 pre-hashes with SHA-256, so passwords at the 72 character
# limit are never silently truncated by bcrypt.
pwd_context = CryptContext(schemes=["bcrypt_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password with a fresh salt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)
