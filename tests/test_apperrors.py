import pytest

from cmmcore import apperrors
from cmmcore.apperrors import CustomError, ErrorType


@pytest.fixture(autouse=True)
def _load_messages():
    apperrors.initialize()


def test_new_uses_default_message():
    err = ErrorType.SUCCESS.new()
    assert err.code == ErrorType.SUCCESS
    assert err.message == apperrors.MSG_SUCCESS
    assert str(err) == apperrors.MSG_SUCCESS


def test_internal_error_shares_general_message():
    err = ErrorType.INTERNAL_SERVER_ERROR.new()
    assert err.message == apperrors.MSG_GENERAL_ERROR


def test_newm_keeps_message():
    err = ErrorType.NOT_FOUND.newm("missing item")
    assert err.code == ErrorType.NOT_FOUND
    assert err.message == "missing item"
    assert str(err) == "missing item"


def test_newf_formats():
    err = ErrorType.INVALID_DATA.newf("id %d missing", 7)
    assert err.message == "id 7 missing"
    assert str(err) == err.message


def test_wrapf_text_and_code():
    inner = ValueError("boom")
    err = ErrorType.NOT_FOUND.wrapf(inner, "ctx %s", "x")
    assert str(err) == "ctx x: boom"
    assert err.code == ErrorType.NOT_FOUND
    assert apperrors.get_error_type(err) == ErrorType.NOT_FOUND


def test_type_wrap_has_empty_message():
    err = ErrorType.CONFLICT_ERROR.wrap(ValueError("boom"))
    assert err.message == ""
    assert str(err) == ": boom"


def test_wrap_none_raises():
    with pytest.raises(ValueError):
        ErrorType.FAIL.wrap(None)
    with pytest.raises(ValueError):
        apperrors.wrap(None, "x")


def test_module_wrap_keeps_code():
    base = ErrorType.AUTHENTICATION_FAILED.newm("denied")
    err = apperrors.wrap(base, "login")
    assert err.code == ErrorType.AUTHENTICATION_FAILED
    assert err.cause() is base


def test_module_wrap_of_plain_error_is_unknown():
    inner = KeyError("k")
    err = apperrors.wrap(inner, "lookup")
    assert err.code == ErrorType.UNKNOWN
    assert err.cause() is inner


def test_cause_of_plain_error_follows_chain():
    root = ValueError("root")
    top = RuntimeError("top")
    top.__cause__ = root
    assert apperrors.cause(top) is root
    assert apperrors.cause(None) is None


def test_cause_of_new_error_is_original():
    err = ErrorType.FAIL.newm("nope")
    assert str(apperrors.cause(err)) == "nope"


def test_report_keeps_context():
    inner = apperrors.add_error_context(ValueError("bad"), "field", "required")
    err = ErrorType.BAD_REQUEST_ERR.report(inner)
    assert err.code == ErrorType.BAD_REQUEST_ERR
    assert err.message == apperrors.MSG_BAD_REQUEST
    assert err.context == {"field": "required"}
    assert err.cause() is inner


def test_add_error_context_converts_plain_error():
    plain = ValueError("oops")
    err = apperrors.add_error_context(plain, "name", "too long")
    assert isinstance(err, CustomError)
    assert err.code == ErrorType.UNKNOWN
    assert err.context == {"name": "too long"}
    assert str(err) == "oops"


def test_add_error_context_updates_existing():
    err = ErrorType.INVALID_DATA.newm("bad")
    same = apperrors.add_error_context(err, "a", "1")
    apperrors.add_error_context(err, "b", "2")
    assert same is err
    assert err.context == {"a": "1", "b": "2"}


def test_new_and_newf_are_unknown():
    assert apperrors.new("plain").code == ErrorType.UNKNOWN
    assert apperrors.new("plain").message == "plain"
    assert apperrors.newf("n=%s", "v").message == "n=v"


def test_is_type():
    err = ErrorType.DECRYPT_ERROR.new()
    assert apperrors.is_type(err, ErrorType.DECRYPT_ERROR)
    assert not apperrors.is_type(err, ErrorType.ENCRYPT_ERROR)
    assert not apperrors.is_type(ValueError("x"), ErrorType.UNKNOWN)


def test_get_error_type_of_plain_error():
    assert apperrors.get_error_type(ValueError("x")) == ErrorType.UNKNOWN


def test_get_message():
    assert apperrors.get_message(None) == ""
    assert apperrors.get_message(ValueError("text")) == "text"


def test_custom_error_conversion():
    assert apperrors.custom_error(None) is None
    existing = ErrorType.FAIL.new()
    assert apperrors.custom_error(existing) is existing
    converted = apperrors.custom_error(ValueError("v"))
    assert converted.code == ErrorType.UNKNOWN
    assert converted.message == "v"


def test_as_custom_error_finds_wrapped():
    inner = ErrorType.NOT_FOUND.newm("gone")
    outer = RuntimeError("outer")
    outer.__cause__ = inner
    assert apperrors.as_custom_error(outer) is inner
    assert apperrors.as_custom_error(ValueError("x")) is None