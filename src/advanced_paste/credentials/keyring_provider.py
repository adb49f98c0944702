"""Credential provider backed by the OS secret store."""
import keyring

from advanced_paste.credentials.base import CredentialProvider


class KeyringCredentialProvider(CredentialProvider):
    def retrieve(self, resource: str, username: str) -> str | None:
        return keyring.get_password(resource, username)
