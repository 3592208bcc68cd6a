import pytest

from gophervm.errors import ErrorCode, GopherError, wrap
from gophervm.handler import ErrorHandler


def test_handle_regular_error_returns_message():
    handler = ErrorHandler(False)
    assert handler.handle_error(RuntimeError("test error")) == "test error"


def test_handle_gopher_error_returns_message():
    handler = ErrorHandler(False)
    err = GopherError(ErrorCode.INVALID_VERSION, "invalid version")
    assert handler.handle_error(err) == "invalid version"


def test_handle_none_is_empty():
    assert ErrorHandler().handle_error(None) == ""


@pytest.mark.parametrize(
    "err",
    [
        RuntimeError("regular error"),
        GopherError(ErrorCode.INVALID_VERSION, "invalid version"),
        GopherError(ErrorCode.INVALID_VERSION, "invalid version").with_context(
            "version", "1.2.3"
        ),
        GopherError(ErrorCode.INVALID_VERSION, "invalid version").with_details(
            "additional info"
        ),
    ],
)
def test_handle_error_nonempty(err):
    assert ErrorHandler(False).handle_error(err) != ""
    assert "error" in ErrorHandler(False).handle_error(err) or "version" in (
        ErrorHandler(False).handle_error(err)
    )


def test_details_included():
    err = GopherError(ErrorCode.INVALID_VERSION, "invalid version").with_details(
        "additional info"
    )
    assert ErrorHandler().handle_error(err) == "invalid version\nDetails: additional info"


def test_context_only_when_verbose():
    err = GopherError(ErrorCode.INVALID_VERSION, "invalid version").with_context(
        "version", "1.2.3"
    )
    assert "Context" not in ErrorHandler(False).handle_error(err)
    verbose = ErrorHandler(True).handle_error(err)
    assert "Context: version=1.2.3" in verbose
    assert f"Location: {err.file}:{err.line}" in verbose
    assert err.file.endswith("test_handler.py")


def test_os_errors():
    handler = ErrorHandler()
    assert handler.handle_error(FileNotFoundError("x")) == "File or directory not found"
    assert handler.handle_error(PermissionError("x")).startswith("Permission denied")


@pytest.mark.parametrize(
    "code,retry,delay",
    [
        (ErrorCode.NETWORK_UNAVAILABLE, True, 5),
        (ErrorCode.TIMEOUT_EXCEEDED, True, 10),
        (ErrorCode.SERVER_UNAVAILABLE, True, 30),
        (ErrorCode.INVALID_VERSION, False, 0),
        (ErrorCode.DOWNLOAD_FAILED, False, 0),
    ],
)
def test_retry(code, retry, delay):
    handler = ErrorHandler()
    err = GopherError(code, "x")
    assert handler.should_retry(err) is retry
    assert handler.get_retry_delay(err) == delay


def test_retry_plain_error():
    handler = ErrorHandler()
    assert handler.should_retry(RuntimeError("x")) is False
    assert handler.get_retry_delay(RuntimeError("x")) == 0


@pytest.mark.parametrize(
    "code,category",
    [
        (ErrorCode.INVALID_VERSION, "User Input Error"),
        (ErrorCode.INVALID_CONFIG_VALUE, "User Input Error"),
        (ErrorCode.SYMLINK_FAILED, "System Error"),
        (ErrorCode.PERMISSION_DENIED, "System Error"),
        (ErrorCode.DOWNLOAD_FAILED, "Network Error"),
        (ErrorCode.SERVER_UNAVAILABLE, "Network Error"),
        (ErrorCode.VERSION_NOT_INSTALLED, "Unknown Error"),
    ],
)
def test_categories(code, category):
    assert ErrorHandler().get_error_category(GopherError(code, "x")) == category


def test_category_plain_error():
    handler = ErrorHandler()
    err = ValueError("x")
    assert handler.is_user_error(err) is False
    assert handler.is_system_error(err) is False
    assert handler.is_network_error(err) is False
    assert handler.get_error_category(err) == "Unknown Error"


def test_suggest_solution():
    handler = ErrorHandler()
    assert handler.suggest_solution(
        GopherError(ErrorCode.NETWORK_UNAVAILABLE, "x")
    ) == "Check your internet connection and try again"
    assert handler.suggest_solution(
        wrap(None, ErrorCode.RESERVED_NAME, "x")
    ) == "Choose a different name that is not reserved by gopher"
    assert handler.suggest_solution(
        GopherError(ErrorCode.EXTRACTION_FAILED, "x")
    ) == "Please check the error details and try again"
    assert handler.suggest_solution(
        RuntimeError("x")
    ) == "Please check the error details and try again"