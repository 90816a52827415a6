"""Credential hasher port (interface)."""

from abc import ABC, abstractmethod


class ICredentialHasher(ABC):
    """One-way password hashing.

    ``hash`` may salt randomly, so two digests of the same plaintext differ.
    Always compare with ``verify``, never with ``==``.
    """

    @abstractmethod
    async def hash(self, plaintext: str) -> str:
        """Produce a salted one-way digest of ``plaintext``."""
        pass

    @abstractmethod
    async def verify(self, plaintext: str, digest: str) -> bool:
        """Check ``plaintext`` against ``digest``.

        Returns:
            True on match, False on mismatch (never raises for a wrong password)
        """
        pass
