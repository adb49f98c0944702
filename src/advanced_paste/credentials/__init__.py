from advanced_paste.credentials.base import CredentialProvider
from advanced_paste.credentials.keyring_provider import KeyringCredentialProvider
from advanced_paste.credentials.loader import load_key
from advanced_paste.credentials.memory_provider import InMemoryCredentialProvider

__all__ = [
    "CredentialProvider",
    "KeyringCredentialProvider",
    "InMemoryCredentialProvider",
    "load_key",
]
