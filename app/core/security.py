import hashlib
import bcrypt


def _digest(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes, so feed it a fixed-size sha256 digest
    return hashlib.sha256(password.encode("utf-8")).digest()


def hash_password(password: str) -> str:
    return bcrypt.hashpw(_digest(password), bcrypt.gensalt()).decode()


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_digest(password), password_hash.encode())
    except ValueError:
        # stored value is not a bcrypt hash
        return False
