"""AI completions helper: key management and clipboard reformatting."""
from http import HTTPStatus

import structlog
from pydantic import BaseModel, ConfigDict

from advanced_paste.client import CompletionClient, OpenAICompletionClient
from advanced_paste.config import AdvancedPasteSettings
from advanced_paste.credentials import CredentialProvider, KeyringCredentialProvider, load_key
from advanced_paste.errors import RequestFailedError
from advanced_paste.prompts import SYSTEM_INSTRUCTIONS, build_user_message
from advanced_paste.telemetry import (
    GenerateCustomErrorEvent,
    GenerateCustomFormatEvent,
    LoggingTelemetrySink,
    TelemetryEvent,
    TelemetrySink,
)

GENERIC_FAILURE_STATUS = -1


class CompletionResult(BaseModel):
    """Response text and HTTP-style status code of one format request."""

    model_config = ConfigDict(frozen=True)

    response: str | None = None
    status_code: int


class AICompletionsHelper:
    def __init__(
        self,
        client: CompletionClient | None = None,
        telemetry: TelemetrySink | None = None,
        credential_provider: CredentialProvider | None = None,
        settings: AdvancedPasteSettings | None = None,
    ) -> None:
        self._settings = settings or AdvancedPasteSettings()
        self._client = client or OpenAICompletionClient(
            base_url=self._settings.base_url,
            model=self._settings.model,
            api_key=self._settings.api_key,
        )
        self._telemetry = telemetry or LoggingTelemetrySink()
        self._credential_provider = credential_provider or KeyringCredentialProvider()
        self._key = self.load_key()

    def load_key(self) -> str:
        return load_key(
            self._credential_provider,
            self._settings.credential_resource,
            self._settings.credential_username,
        )

    @property
    def is_enabled(self) -> bool:
        return bool(self._key)

    def set_key(self, key: str) -> None:
        self._key = key

    def get_key(self) -> str:
        return self._key

    def _write_event(self, event: TelemetryEvent) -> None:
        try:
            self._telemetry.write_event(event)
        except Exception as e:
            structlog.get_logger().warning(
                "telemetry_sink_failed",
                sink=type(self._telemetry).__name__,
                telemetry_event=event.event_name,
                error=str(e),
            )

    def format_string(self, instructions: str, clipboard_content: str) -> CompletionResult:
        """
        Reformat clipboard content following the user's instructions.

        Always returns a result: status 200 with the model output on success,
        the service's status code on a rejected request, -1 on any other failure.
        """
        log = structlog.get_logger()
        try:
            user_message = build_user_message(instructions, clipboard_content)
            completion = self._client.complete(SYSTEM_INSTRUCTIONS, user_message)
        except RequestFailedError as e:
            log.error("get_ai_completion_failed", status_code=e.status_code, error=e.message, exc_info=True)
            self._write_event(GenerateCustomErrorEvent(error_message=e.message))
            return CompletionResult(response=None, status_code=e.status_code)
        except Exception as e:
            log.error("get_ai_completion_failed", error=str(e), exc_info=True)
            self._write_event(GenerateCustomErrorEvent(error_message=str(e)))
            return CompletionResult(response=None, status_code=GENERIC_FAILURE_STATUS)

        self._write_event(
            GenerateCustomFormatEvent(
                prompt_tokens=completion.input_tokens,
                completion_tokens=completion.output_tokens,
                model_name=self._settings.telemetry_model_name,
            )
        )
        return CompletionResult(response=completion.text, status_code=HTTPStatus.OK.value)
