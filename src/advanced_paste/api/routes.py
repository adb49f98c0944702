"""Format API routes."""
from http import HTTPStatus

import structlog
from fastapi import APIRouter, Request

from advanced_paste.api.schemas import FormatRequest, FormatResponse
from advanced_paste.helper import AICompletionsHelper

router = APIRouter()


def get_helper(request: Request) -> AICompletionsHelper:
    return request.app.state.helper


@router.post("/format", response_model=FormatResponse)
def format_clipboard(body: FormatRequest, request: Request) -> FormatResponse:
    helper = get_helper(request)
    log = structlog.get_logger()
    if not helper.is_enabled:
        log.info("format_request_skipped", reason="ai_disabled")
        return FormatResponse(response=None, status_code=HTTPStatus.UNAUTHORIZED.value)
    result = helper.format_string(body.instructions, body.clipboard_content)
    log.info(
        "format_request_completed",
        status_code=result.status_code,
        instructions_chars=len(body.instructions),
        clipboard_chars=len(body.clipboard_content),
    )
    return FormatResponse(response=result.response, status_code=result.status_code)
