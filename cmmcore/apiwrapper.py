"""Uniform API response envelopes and their HTTP status mapping."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from cmmcore.apperrors import ErrorType, get_message

STATUS_SUCCESS = 1
STATUS_FAIL = 0

_STATUS_BY_ERROR = {
    ErrorType.BAD_REQUEST_ERR: HTTPStatus.BAD_REQUEST,
    ErrorType.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorType.AUTHENTICATION_FAILED: HTTPStatus.UNAUTHORIZED,
    ErrorType.INTERNAL_SERVER_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
}


@dataclass
class APIResponse:
    """The response envelope sent to API clients."""

    status: int
    code: ErrorType
    message: str
    data: Any = None
    error: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form, leaving out empty data and error."""
        body: dict[str, Any] = {
            "status": self.status,
            "code": int(self.code),
            "message": self.message,
        }
        if self.data is not None:
            body["data"] = self.data
        if self.error is not None:
            body["error"] = self.error
        return body


def success_response(data: Any) -> APIResponse:
    """Build a success envelope around the data."""
    return APIResponse(
        status=STATUS_SUCCESS,
        code=ErrorType.SUCCESS,
        message=get_message(ErrorType.SUCCESS.new()),
        data=data,
    )


def error_response(code: ErrorType, message: str) -> APIResponse:
    """Build a failure envelope for the given code and message."""
    return APIResponse(
        status=STATUS_FAIL,
        code=code,
        message=message,
        error={"code": int(code), "message": message},
    )


def status_code_for(error_type: ErrorType) -> HTTPStatus:
    """Map an error code to an HTTP status, 500 when unmapped."""
    return _STATUS_BY_ERROR.get(error_type, HTTPStatus.INTERNAL_SERVER_ERROR)


def render(response: APIResponse) -> tuple[HTTPStatus, dict[str, Any]]:
    """Return the HTTP status and body for a response envelope."""
    if response.status == STATUS_SUCCESS:
        return HTTPStatus.OK, response.to_dict()
    return status_code_for(response.code), response.to_dict()


def _send_error(
    status: HTTPStatus, error_type: ErrorType, message: str
) -> tuple[HTTPStatus, dict[str, Any]]:
    return status, error_response(error_type, message).to_dict()


def bad_request(message: str) -> tuple[HTTPStatus, dict[str, Any]]:
    return _send_error(HTTPStatus.BAD_REQUEST, ErrorType.BAD_REQUEST_ERR, message)


def unauthorized(message: str) -> tuple[HTTPStatus, dict[str, Any]]:
    return _send_error(HTTPStatus.UNAUTHORIZED, ErrorType.AUTHENTICATION_FAILED, message)


def internal_error(message: str) -> tuple[HTTPStatus, dict[str, Any]]:
    return _send_error(
        HTTPStatus.INTERNAL_SERVER_ERROR, ErrorType.INTERNAL_SERVER_ERROR, message
    )