"""bcrypt credential hasher."""

import asyncio

import bcrypt

from domain.auth.core.ports.credential_hasher import ICredentialHasher
from infrastructure.config import DEFAULT_BCRYPT_ROUNDS

MAX_PASSWORD_BYTES = 72


class BcryptCredentialHasher(ICredentialHasher):
    """bcrypt implementation of the credential hasher.

    Every ``hash`` call draws a fresh salt, which bcrypt embeds in the digest;
    ``verify`` reads it back from there. The CPU-bound work runs in a worker
    thread so the event loop keeps serving other requests.

    Note:
        Only the first 72 bytes of the UTF-8 password are significant; longer
        passwords are truncated before hashing and verification.

    Examples:
        >>> hasher = BcryptCredentialHasher(rounds=4)
        >>> digest = await hasher.hash("s3cret!")
        >>> await hasher.verify("s3cret!", digest)
        True
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        """Initialize hasher.

        Args:
            rounds: bcrypt cost factor (log2 of iterations)
        """
        self.rounds = rounds

    def _sync_hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(plaintext), salt).decode("utf-8")

    @staticmethod
    def _sync_verify(plaintext: str, digest: str) -> bool:
        return bcrypt.checkpw(_encode(plaintext), digest.encode("utf-8"))

    async def hash(self, plaintext: str) -> str:
        """Hash password using bcrypt in thread pool."""
        return await asyncio.to_thread(self._sync_hash, plaintext)

    async def verify(self, plaintext: str, digest: str) -> bool:
        """Verify password against digest in thread pool.

        Raises:
            ValueError: If ``digest`` is not a bcrypt digest (corrupt record)
        """
        return await asyncio.to_thread(self._sync_verify, plaintext, digest)


def _encode(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:MAX_PASSWORD_BYTES]
