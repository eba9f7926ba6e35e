from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """One-way credential hashing"""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted, non-reversible digest of password"""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Check password against a digest produced by hash()"""
        pass
