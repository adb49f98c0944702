"""Load the API key from a credential provider."""
import structlog

from advanced_paste.credentials.base import CredentialProvider


def load_key(provider: CredentialProvider, resource: str, username: str) -> str:
    """Return the stored key, or an empty string if it cannot be read for any reason."""
    try:
        secret = provider.retrieve(resource, username)
    except Exception as e:
        structlog.get_logger().debug(
            "credential_lookup_failed",
            resource=resource,
            error_type=type(e).__name__,
        )
        return ""
    if secret is None:
        return ""
    return str(secret)
