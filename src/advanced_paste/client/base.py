"""Completion client interface."""
from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict


class Completion(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str | None
    finish_reason: str | None = None
    input_tokens: int = 0
    output_tokens: int = 0


class CompletionClient(ABC):
    @abstractmethod
    def complete(self, system_instructions: str, user_message: str) -> Completion:
        """Run a single chat completion. Raises RequestFailedError when the service rejects the call."""
        ...
