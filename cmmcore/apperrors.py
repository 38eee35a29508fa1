"""Application error codes and a structured error type carrying them."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

MSG_SUCCESS = "Thành công!"
MSG_FAIL = "Không thành công!"
MSG_GENERAL_ERROR = "Có lỗi xảy ra. Thử lại sau bạn nhé."
MSG_BAD_REQUEST = "Yêu cầu không hợp lệ!"
MSG_AUTHENTICATE_FAILED = "Không thể xác thực tài khoản!"
MSG_DATA_ERROR = "Dữ liệu không hợp lệ vui lòng! Vui lòng thử lại."
MSG_ENCRYPT_ERROR = "Thông tin mã hoá không hợp lệ! Vui lòng thử lại."
MSG_DECRYPT_ERROR = "Thông tin giải mã không hợp lệ! Vui lòng thử lại."
MSG_METHOD_ERROR = "Không hỗ trợ phương thức này! Vui lòng thử lại."

# Default messages per code; empty until initialize() is called.
_error_map: dict[ErrorType, str] = {}


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    """Apply printf-style formatting only when arguments are given."""
    return fmt % args if args else fmt


class _WrappedError(Exception):
    """An error annotated with a message; the wrapped error is its cause."""

    def __init__(self, msg: str, inner: BaseException) -> None:
        super().__init__(f"{msg}: {inner}")
        self.msg = msg
        self.__cause__ = inner


class ErrorType(IntEnum):
    """Numeric application error codes."""

    PROCESSING = 2
    SUCCESS = 1
    UNKNOWN = 0
    BAD_REQUEST_ERR = -1
    NOT_FOUND = -2
    AUTHENTICATION_FAILED = -3
    INTERNAL_SERVER_ERROR = -4
    ILLEGAL_STATE_ERROR = -5
    SEND_MESSAGE_ERROR = -6
    CALL_INTERNAL_API_ERROR = -7
    INVALID_DATA = -8
    SERIALIZING_ERROR = -9
    DESERIALIZING_ERROR = -10
    CASTING_ERROR = -11
    PARSING_ERROR = -12
    CONFLICT_ERROR = -13
    CALL_GRPC_API_ERROR = -14
    ENCRYPT_ERROR = -15
    DECRYPT_ERROR = -16
    METHOD_ERROR = -17
    FAIL = -49

    def new(self) -> CustomError:
        """Create an error of this type with its default message."""
        msg = _error_map.get(self, "")
        return CustomError(self, msg, Exception(msg))

    def newm(self, msg: str) -> CustomError:
        """Create an error of this type with a custom message."""
        return CustomError(self, msg, Exception(msg))

    def newf(self, fmt: str, *args: Any) -> CustomError:
        """Create an error of this type with a printf-style message."""
        text = _format(fmt, args)
        return CustomError(self, text, Exception(text))

    def wrap(self, err: BaseException) -> CustomError:
        """Wrap an error under this type with an empty message."""
        return self.wrapf(err, "")

    def wrapf(self, err: BaseException, msg: str, *args: Any) -> CustomError:
        """Wrap an error under this type with a printf-style message."""
        if err is None:
            raise ValueError("cannot wrap a missing error")
        text = _format(msg, args)
        return CustomError(
            self,
            text,
            _WrappedError(text, err),
            cause_error=wrapf(err, msg, *args),
        )

    def report(self, err: BaseException) -> CustomError:
        """Report an error under this type, keeping its context."""
        msg = _error_map.get(self, "")
        return CustomError(
            self,
            msg,
            Exception(msg),
            cause_error=custom_error(err),
            context=_get_error_context(err),
        )


class CustomError(Exception):
    """An error carrying an application code, a message and optional context."""

    def __init__(
        self,
        code: ErrorType,
        message: str,
        original_error: BaseException,
        cause_error: BaseException | None = None,
        context: dict[str, str] | None = None,
        stack_trace: str = "",
    ) -> None:
        super().__init__(str(original_error))
        self.code = code
        self.message = message
        self.original_error = original_error
        self.cause_error = cause_error
        self.context = context
        self.stack_trace = stack_trace

    def __str__(self) -> str:
        return str(self.original_error)

    def cause(self) -> BaseException:
        """Return the recorded cause, or the underlying error if none."""
        if self.cause_error is not None:
            return self.cause_error
        return self.original_error


def initialize() -> None:
    """Load the table of default messages for each error code."""
    _error_map.clear()
    _error_map.update(
        {
            ErrorType.SUCCESS: MSG_SUCCESS,
            ErrorType.FAIL: MSG_FAIL,
            ErrorType.UNKNOWN: MSG_GENERAL_ERROR,
            ErrorType.BAD_REQUEST_ERR: MSG_BAD_REQUEST,
            ErrorType.AUTHENTICATION_FAILED: MSG_AUTHENTICATE_FAILED,
            ErrorType.INTERNAL_SERVER_ERROR: MSG_GENERAL_ERROR,
            ErrorType.CALL_INTERNAL_API_ERROR: MSG_GENERAL_ERROR,
            ErrorType.PARSING_ERROR: MSG_DATA_ERROR,
            ErrorType.INVALID_DATA: MSG_DATA_ERROR,
            ErrorType.ENCRYPT_ERROR: MSG_ENCRYPT_ERROR,
            ErrorType.DECRYPT_ERROR: MSG_DECRYPT_ERROR,
        }
    )


def as_custom_error(err: BaseException | None) -> CustomError | None:
    """Find the first CustomError in the chain of wrapped errors."""
    while err is not None:
        if isinstance(err, CustomError):
            return err
        err = err.__cause__
    return None


def add_error_context(err: BaseException, field: str, message: str) -> CustomError:
    """Attach a field/message pair to the error's context."""
    if err is None:
        raise ValueError("cannot add context to a missing error")
    custom = as_custom_error(err)
    if custom is None:
        custom = custom_error(err)
    if custom.context is None:
        custom.context = {}
    custom.context[field] = message
    return custom


def _get_error_context(err: BaseException | None) -> dict[str, str]:
    custom = as_custom_error(err)
    if custom is not None and custom.context:
        return custom.context
    return {}


def cause(err: BaseException | None) -> BaseException | None:
    """Return the underlying cause of an error."""
    custom = as_custom_error(err)
    if custom is not None:
        return custom.cause()
    while err is not None and err.__cause__ is not None:
        err = err.__cause__
    return err


def new(msg: str) -> CustomError:
    """Create an error of unknown type."""
    return newf(msg)


def newf(msg: str, *args: Any) -> CustomError:
    """Create an error of unknown type with a printf-style message."""
    return ErrorType.UNKNOWN.newf(msg, *args)


def get_error_type(err: BaseException | None) -> ErrorType:
    """Return the code of an error, UNKNOWN if it carries none."""
    custom = as_custom_error(err)
    if custom is not None:
        return custom.code
    return ErrorType.UNKNOWN


def wrap(err: BaseException, msg: str) -> CustomError:
    """Wrap an error with a message, keeping its code."""
    return wrapf(err, msg)


def wrapf(err: BaseException, msg: str, *args: Any) -> CustomError:
    """Wrap an error with a printf-style message, keeping its code."""
    if err is None:
        raise ValueError("cannot wrap a missing error")
    text = _format(msg, args)
    custom = as_custom_error(err)
    code = custom.code if custom is not None else ErrorType.UNKNOWN
    return CustomError(code, text, _WrappedError(text, err), cause_error=err)


def get_message(err: BaseException | None) -> str:
    """Return the error text, or an empty string for no error."""
    if err is None:
        return ""
    return str(err)


def is_type(err: BaseException | None, error_type: ErrorType) -> bool:
    """Tell whether an error carries the given code."""
    custom = as_custom_error(err)
    return custom is not None and custom.code == error_type


def custom_error(err: BaseException | None) -> CustomError | None:
    """Return the error as a CustomError, converting plain errors."""
    if err is None:
        return None
    custom = as_custom_error(err)
    if custom is not None:
        return custom
    return CustomError(ErrorType.UNKNOWN, str(err), err)