from abc import ABC, abstractmethod


class ITokenGenerator(ABC):
    """Source of new access token strings"""

    @abstractmethod
    def generate(self) -> str:
        """Return a fresh 21-character URL-safe token"""
        pass
