"""In-memory credential provider for tests and mock mode."""
from advanced_paste.credentials.base import CredentialProvider


class InMemoryCredentialProvider(CredentialProvider):
    def __init__(self, secrets: dict[tuple[str, str], str] | None = None) -> None:
        self._secrets: dict[tuple[str, str], str] = dict(secrets or {})

    def store(self, resource: str, username: str, password: str) -> None:
        self._secrets[(resource, username)] = password

    def retrieve(self, resource: str, username: str) -> str | None:
        return self._secrets.get((resource, username))
