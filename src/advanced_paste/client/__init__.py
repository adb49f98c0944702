from advanced_paste.client.base import Completion, CompletionClient
from advanced_paste.client.mock_client import MockCompletionClient
from advanced_paste.client.openai_client import OpenAICompletionClient

__all__ = ["Completion", "CompletionClient", "MockCompletionClient", "OpenAICompletionClient"]
