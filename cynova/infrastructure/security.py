"""Password Hashing — bcrypt with a fixed work factor.

Invariants:
    - BCRYPT_ROUNDS is fixed; every stored credential uses it
    - Inputs longer than BCRYPT_MAX_BYTES are refused, never truncated
    - verify_password never raises on malformed input, it returns False
    - Async wrappers run bcrypt in a worker thread (it is CPU-bound)
"""

import asyncio

import bcrypt

BCRYPT_ROUNDS = 10
BCRYPT_MAX_BYTES = 72


class PasswordHashingError(RuntimeError):
    pass


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise PasswordHashingError("Password is empty.")
    if len(password) > BCRYPT_MAX_BYTES:
        raise PasswordHashingError(f"Password exceeds {BCRYPT_MAX_BYTES} bytes.")
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


async def hash_password_async(plain_password: str) -> str:
    return await asyncio.to_thread(hash_password, plain_password)


async def verify_password_async(plain_password: str, password_hash: str) -> bool:
    return await asyncio.to_thread(verify_password, plain_password, password_hash)
