"""Chat-completion client for OpenAI-compatible endpoints (local Ollama by default)."""
import openai
import structlog

from advanced_paste.client.base import Completion, CompletionClient
from advanced_paste.errors import RequestFailedError


class OpenAICompletionClient(CompletionClient):
    def __init__(self, base_url: str, model: str, api_key: str = "ollama") -> None:
        self._base_url = base_url
        self._model = model
        self._api_key = api_key

    def _create_client(self) -> openai.OpenAI:
        return openai.OpenAI(
            api_key=self._api_key,
            base_url=self._base_url,
            max_retries=0,
        )

    def complete(self, system_instructions: str, user_message: str) -> Completion:
        prompt = system_instructions + "\n\n" + user_message
        with self._create_client() as client:
            try:
                response = client.chat.completions.create(
                    model=self._model,
                    messages=[{"role": "user", "content": prompt}],
                )
            except openai.APIStatusError as e:
                raise RequestFailedError(e.status_code, e.message) from e

        choice = response.choices[0]
        if choice.finish_reason == "length":
            structlog.get_logger().warning(
                "completion_truncated",
                msg="Cut off due to length constraints",
                model=self._model,
            )
        usage = response.usage
        return Completion(
            text=choice.message.content,
            finish_reason=choice.finish_reason,
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
        )
