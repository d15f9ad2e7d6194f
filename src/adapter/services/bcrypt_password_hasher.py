import asyncio
from typing import Callable

import bcrypt

from config import get_salt_rounds
from src.app.services.password_hasher import IPasswordHasher

MIN_ROUNDS = 4
MAX_ROUNDS = 31
MAX_PASSWORD_BYTES = 72


def _encode(plaintext: str) -> bytes:
    # bcrypt only uses the first 72 bytes; truncate the same way on hash and verify
    return plaintext.encode("utf-8")[:MAX_PASSWORD_BYTES]


class BcryptPasswordHasher(IPasswordHasher):
    """
    Bcrypt password hasher.

    The cost factor comes from rounds_provider on every hash call, so a
    changed SALT_ROUNDS applies without restarting the process. Hashing runs
    in a worker thread to keep the event loop free.
    """

    def __init__(self, rounds_provider: Callable[[], int] = get_salt_rounds):
        self.rounds_provider = rounds_provider

    def _rounds(self) -> int:
        return min(max(self.rounds_provider(), MIN_ROUNDS), MAX_ROUNDS)

    async def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(self._rounds())
        digest = await asyncio.to_thread(bcrypt.hashpw, _encode(plaintext), salt)
        return digest.decode("utf-8")

    async def verify(self, plaintext: str, digest: str) -> bool:
        if not digest:
            return False
        try:
            return await asyncio.to_thread(
                bcrypt.checkpw, _encode(plaintext), digest.encode("utf-8")
            )
        except ValueError:
            # Malformed digest (invalid salt) is a non-match
            return False
