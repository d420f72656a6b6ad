
from abc import ABC, abstractmethod

class Client(ABC):
    """Abstract base class for chat-completion clients."""

    def __init__(self, api_key: str):
        self.api_key = api_key

    @abstractmethod
    def complete(self, request: dict) -> str:
        """Sends one chat-completion request and returns the raw response body."""
        pass
