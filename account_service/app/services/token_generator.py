from abc import ABC, abstractmethod


class ITokenGenerator(ABC):
    """Issues opaque, unguessable tokens"""

    @abstractmethod
    def generate(self) -> str:
        pass
