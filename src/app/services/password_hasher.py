from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """Password hashing interface - application layer"""

    @abstractmethod
    async def hash(self, plaintext: str) -> str:
        """Hash plaintext password for storage"""
        pass

    @abstractmethod
    async def verify(self, plaintext: str, digest: str) -> bool:
        """Verify plaintext password against a stored digest, False on malformed digest"""
        pass
