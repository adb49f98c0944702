"""Mock completion client: returns a fixed completion or raises a preset error."""
from advanced_paste.client.base import Completion, CompletionClient


class MockCompletionClient(CompletionClient):
    def __init__(
        self,
        text: str | None = "This is a mock completion.",
        finish_reason: str = "stop",
        input_tokens: int = 0,
        output_tokens: int = 0,
        error: Exception | None = None,
    ) -> None:
        self._text = text
        self._finish_reason = finish_reason
        self._input_tokens = input_tokens
        self._output_tokens = output_tokens
        self._error = error
        self.calls: list[tuple[str, str]] = []

    def complete(self, system_instructions: str, user_message: str) -> Completion:
        self.calls.append((system_instructions, user_message))
        if self._error is not None:
            raise self._error
        return Completion(
            text=self._text,
            finish_reason=self._finish_reason,
            input_tokens=self._input_tokens,
            output_tokens=self._output_tokens,
        )
