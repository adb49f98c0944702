"""Advanced paste: AI-assisted clipboard reformatting."""
from advanced_paste.helper import AICompletionsHelper, CompletionResult

__all__ = ["AICompletionsHelper", "CompletionResult"]
