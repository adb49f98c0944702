"""Credential provider interface."""
from abc import ABC, abstractmethod


class CredentialProvider(ABC):
    @abstractmethod
    def retrieve(self, resource: str, username: str) -> str | None:
        """Return the stored secret for (resource, username), or None if absent."""
        ...
