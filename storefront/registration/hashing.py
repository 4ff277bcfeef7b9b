"""Password hashing.

This is a placeholder scheme for the exercise, not a security measure: the
hash is ``HASHED_`` followed by the 32-bit string hash of the salted password.
"""

HASH_PREFIX = "HASHED_"


def string_hash(value: str) -> int:
    """32-bit signed polynomial hash (``h = 31 * h + c``) over UTF-16 code units."""
    data = value.encode("utf-16-be", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        h = (31 * h + int.from_bytes(data[i:i + 2], "big")) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def hash_password(password: str) -> str:
    salt = f"SALT_{len(password)}"
    return f"{HASH_PREFIX}{string_hash(password + salt)}"


def verify_password(password: str, hashed_password: str) -> bool:
    return hash_password(password) == hashed_password
