"""Shared fixtures."""
import pytest

from advanced_paste.config import AdvancedPasteSettings
from advanced_paste.credentials import InMemoryCredentialProvider


@pytest.fixture
def settings() -> AdvancedPasteSettings:
    return AdvancedPasteSettings(_env_file=None)


@pytest.fixture
def credentials(settings: AdvancedPasteSettings) -> InMemoryCredentialProvider:
    provider = InMemoryCredentialProvider()
    provider.store(settings.credential_resource, settings.credential_username, "sk-test")
    return provider
