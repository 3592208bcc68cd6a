import pytest

from gophervm import errors
from gophervm.errors import ErrorCode, GopherError


def test_basic_error_string():
    err = GopherError(ErrorCode.INVALID_VERSION, "invalid version")
    assert str(err) == "INVALID_VERSION: invalid version"
    assert err.code is ErrorCode.INVALID_VERSION
    assert err.message == "invalid version"


def test_wrapped_error_string():
    inner = ValueError("wrapped error")
    err = errors.wrap(inner, ErrorCode.INSTALLATION_FAILED, "installation failed")
    assert str(err) == "INSTALLATION_FAILED: installation failed: wrapped error"
    assert err.code is ErrorCode.INSTALLATION_FAILED
    assert err.message == "installation failed"


def test_error_can_be_raised_and_caught():
    err = errors.file_not_found("/tmp/x")
    assert err.code is ErrorCode.FILE_NOT_FOUND
    assert str(err) == "FILE_NOT_FOUND: file not found: /tmp/x"
    with pytest.raises(GopherError, match="file not found: /tmp/x"):
        raise err


def test_is_gopher_error():
    assert errors.is_gopher_error(GopherError(ErrorCode.INVALID_VERSION, "test"))
    assert not errors.is_gopher_error(RuntimeError("regular error"))


def test_get_error_code():
    assert errors.get_error_code(GopherError(ErrorCode.INVALID_VERSION, "test")) is ErrorCode.INVALID_VERSION
    assert errors.get_error_code(RuntimeError("regular error")) is ErrorCode.UNKNOWN


def test_is_error_code():
    assert errors.is_error_code(GopherError(ErrorCode.INVALID_VERSION, "test"), ErrorCode.INVALID_VERSION)
    assert not errors.is_error_code(RuntimeError("regular error"), ErrorCode.INVALID_VERSION)


def test_unknown_code_value():
    code = errors.get_error_code(RuntimeError("plain"))
    assert str(code) == "UNKNOWN_ERROR"


@pytest.mark.parametrize(
    "err, expected",
    [
        (errors.invalid_version("1.2.3"), "INVALID_VERSION: invalid version format: 1.2.3"),
        (errors.missing_argument("install"), "MISSING_ARGUMENT: install command requires additional arguments"),
        (errors.version_not_installed("1.21.0"), "VERSION_NOT_INSTALLED: version 1.21.0 is not installed"),
        (errors.system_go_not_available(), "SYSTEM_GO_NOT_AVAILABLE: system Go is not available"),
        (errors.reserved_name("system"), "RESERVED_NAME: name 'system' is reserved"),
        (errors.invalid_format("key=value"), "INVALID_FORMAT: invalid format: expected key=value"),
        (errors.unknown_config_option("foo"), "UNKNOWN_CONFIG_OPTION: unknown configuration option: foo"),
        (errors.alias_not_found("stable"), "ALIAS_NOT_FOUND: alias not found: stable"),
        (errors.timeout_exceeded("download"), "TIMEOUT_EXCEEDED: timeout exceeded for operation: download"),
    ],
)
def test_constructors(err, expected):
    assert str(err) == expected


def test_wrapping_constructors_keep_cause():
    inner = OSError("disk full")
    err = errors.download_failed("1.21.0", inner)
    assert err.wrapped is inner
    assert err.__cause__ is inner
    assert str(err) == "DOWNLOAD_FAILED: failed to download version 1.21.0: disk full"


def test_symlink_failed_message():
    err = errors.symlink_failed("/a", "/b", OSError("nope"))
    assert str(err) == "SYMLINK_FAILED: failed to create symlink from /a to /b: nope"


def test_with_context_and_details():
    err = GopherError(ErrorCode.INVALID_VERSION, "test error")
    err = err.with_context("version", "1.2.3")
    err = err.with_context("command", "install")
    err = err.with_details("Additional details here")
    assert err.context["version"] == "1.2.3"
    assert err.context["command"] == "install"
    assert err.details == "Additional details here"


def test_unwrap_returns_original():
    original = RuntimeError("original error")
    wrapped = errors.wrap(original, ErrorCode.INSTALLATION_FAILED, "wrapped message")
    assert wrapped.wrapped is original


def test_location_points_to_caller():
    err = errors.invalid_version("x")
    assert err.file == __file__
    assert err.line > 0