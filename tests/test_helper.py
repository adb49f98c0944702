"""Tests for AICompletionsHelper: key handling and format_string result mapping."""
from unittest.mock import MagicMock

import pytest
from structlog.testing import capture_logs

from advanced_paste.client import MockCompletionClient, OpenAICompletionClient
from advanced_paste.config import AdvancedPasteSettings
from advanced_paste.credentials import InMemoryCredentialProvider
from advanced_paste.errors import RequestFailedError
from advanced_paste.helper import AICompletionsHelper, CompletionResult
from advanced_paste.prompts import SYSTEM_INSTRUCTIONS
from advanced_paste.telemetry import GenerateCustomErrorEvent, GenerateCustomFormatEvent


@pytest.fixture
def telemetry() -> MagicMock:
    return MagicMock()


def _helper(
    client: MockCompletionClient | OpenAICompletionClient,
    telemetry: MagicMock,
    credentials: InMemoryCredentialProvider,
    settings: AdvancedPasteSettings,
) -> AICompletionsHelper:
    return AICompletionsHelper(
        client=client,
        telemetry=telemetry,
        credential_provider=credentials,
        settings=settings,
    )


def test_missing_credential_disables_ai(telemetry: MagicMock, settings: AdvancedPasteSettings) -> None:
    helper = _helper(MockCompletionClient(), telemetry, InMemoryCredentialProvider(), settings)
    assert helper.is_enabled is False
    assert helper.get_key() == ""


def test_stored_credential_enables_ai(
    telemetry: MagicMock,
    credentials: InMemoryCredentialProvider,
    settings: AdvancedPasteSettings,
) -> None:
    helper = _helper(MockCompletionClient(), telemetry, credentials, settings)
    assert helper.is_enabled is True
    assert helper.get_key() == "sk-test"


def test_set_key_overrides_loaded_key(telemetry: MagicMock, settings: AdvancedPasteSettings) -> None:
    helper = _helper(MockCompletionClient(), telemetry, InMemoryCredentialProvider(), settings)
    helper.set_key("sk-new")
    assert helper.is_enabled is True
    assert helper.get_key() == "sk-new"
    helper.set_key("")
    assert helper.is_enabled is False


def test_format_string_builds_prompt(
    telemetry: MagicMock,
    credentials: InMemoryCredentialProvider,
    settings: AdvancedPasteSettings,
) -> None:
    client = MockCompletionClient(text="Hello")
    helper = _helper(client, telemetry, credentials, settings)

    helper.format_string("Make it uppercase", "hello world")

    system, user = client.calls[0]
    assert system == SYSTEM_INSTRUCTIONS
    assert "User instructions:\nMake it uppercase" in user
    assert "Clipboard Content:\nhello world" in user
    assert user.endswith("Output:\n")


def test_format_string_success(
    telemetry: MagicMock,
    credentials: InMemoryCredentialProvider,
    settings: AdvancedPasteSettings,
) -> None:
    client = MockCompletionClient(text="Hello", finish_reason="stop", input_tokens=40, output_tokens=1)
    helper = _helper(client, telemetry, credentials, settings)

    result = helper.format_string("Say hello", "x")

    assert result == CompletionResult(response="Hello", status_code=200)
    telemetry.write_event.assert_called_once_with(
        GenerateCustomFormatEvent(
            prompt_tokens=40,
            completion_tokens=1,
            model_name="gpt-3.5-turbo-instruct",
        )
    )


def test_format_string_truncated_output_is_not_an_error(
    telemetry: MagicMock,
    credentials: InMemoryCredentialProvider,
    settings: AdvancedPasteSettings,
) -> None:
    client = MockCompletionClient(text="Hel", finish_reason="length")
    helper = _helper(client, telemetry, credentials, settings)

    result = helper.format_string("Say hello", "x")

    assert result.response == "Hel"
    assert result.status_code == 200


def test_format_string_request_failure_returns_status(
    telemetry: MagicMock,
    credentials: InMemoryCredentialProvider,
    settings: AdvancedPasteSettings,
) -> None:
    client = MockCompletionClient(error=RequestFailedError(429, "Too many requests"))
    helper = _helper(client, telemetry, credentials, settings)

    result = helper.format_string("Say hello", "x")

    assert result.response is None
    assert result.status_code == 429
    telemetry.write_event.assert_called_once_with(
        GenerateCustomErrorEvent(error_message="Too many requests")
    )


def test_format_string_generic_failure_returns_minus_one(
    telemetry: MagicMock,
    credentials: InMemoryCredentialProvider,
    settings: AdvancedPasteSettings,
) -> None:
    client = MockCompletionClient(error=ConnectionError("connection refused"))
    helper = _helper(client, telemetry, credentials, settings)

    result = helper.format_string("Say hello", "x")

    assert result == CompletionResult(response=None, status_code=-1)
    telemetry.write_event.assert_called_once_with(
        GenerateCustomErrorEvent(error_message="connection refused")
    )


def test_format_string_malformed_endpoint_returns_minus_one(
    telemetry: MagicMock,
    credentials: InMemoryCredentialProvider,
    settings: AdvancedPasteSettings,
) -> None:
    client = OpenAICompletionClient(base_url="not-a-valid-endpoint", model="phi3")
    helper = _helper(client, telemetry, credentials, settings)

    result = helper.format_string("Say hello", "x")

    assert result.response is None
    assert result.status_code == -1
    assert isinstance(telemetry.write_event.call_args.args[0], GenerateCustomErrorEvent)


def test_result_is_immutable() -> None:
    result = CompletionResult(response="x", status_code=200)
    with pytest.raises(Exception):
        result.status_code = 500  # type: ignore[misc]


def test_format_string_none_instructions_returns_minus_one(
    telemetry: MagicMock,
    credentials: InMemoryCredentialProvider,
    settings: AdvancedPasteSettings,
) -> None:
    client = MockCompletionClient(text="Hello")
    helper = _helper(client, telemetry, credentials, settings)

    result = helper.format_string(None, "x")  # type: ignore[arg-type]

    assert result == CompletionResult(response=None, status_code=-1)
    assert client.calls == []
    event = telemetry.write_event.call_args.args[0]
    assert isinstance(event, GenerateCustomErrorEvent)


def test_format_string_absent_completion_text_stays_absent(
    telemetry: MagicMock,
    credentials: InMemoryCredentialProvider,
    settings: AdvancedPasteSettings,
) -> None:
    helper = _helper(MockCompletionClient(text=None), telemetry, credentials, settings)

    result = helper.format_string("Say hello", "x")

    assert result == CompletionResult(response=None, status_code=200)


@pytest.mark.parametrize(
    ("client", "expected"),
    [
        (MockCompletionClient(text="Hello"), CompletionResult(response="Hello", status_code=200)),
        (
            MockCompletionClient(error=RequestFailedError(429, "Too many requests")),
            CompletionResult(response=None, status_code=429),
        ),
        (
            MockCompletionClient(error=ConnectionError("connection refused")),
            CompletionResult(response=None, status_code=-1),
        ),
    ],
)
def test_format_string_survives_failing_telemetry_sink(
    client: MockCompletionClient,
    expected: CompletionResult,
    credentials: InMemoryCredentialProvider,
    settings: AdvancedPasteSettings,
) -> None:
    telemetry = MagicMock()
    telemetry.write_event.side_effect = RuntimeError("sink down")
    helper = _helper(client, telemetry, credentials, settings)

    with capture_logs() as logs:
        result = helper.format_string("Say hello", "x")

    assert result == expected
    telemetry.write_event.assert_called_once()
    assert any(entry["event"] == "telemetry_sink_failed" for entry in logs)
