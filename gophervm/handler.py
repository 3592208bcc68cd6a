"""Turn errors into user-facing messages, categories and advice."""

from __future__ import annotations

from .errors import ErrorCode, GopherError

_RETRY_DELAYS: dict[ErrorCode, int] = {
    ErrorCode.NETWORK_UNAVAILABLE: 5,
    ErrorCode.TIMEOUT_EXCEEDED: 10,
    ErrorCode.SERVER_UNAVAILABLE: 30,
}

_USER_CODES = frozenset(
    {
        ErrorCode.INVALID_VERSION,
        ErrorCode.INVALID_ARGUMENT,
        ErrorCode.INVALID_FORMAT,
        ErrorCode.MISSING_ARGUMENT,
        ErrorCode.INVALID_ALIAS_NAME,
        ErrorCode.RESERVED_NAME,
        ErrorCode.UNKNOWN_CONFIG_OPTION,
        ErrorCode.INVALID_CONFIG_VALUE,
    }
)

_SYSTEM_CODES = frozenset(
    {
        ErrorCode.SYSTEM_GO_NOT_AVAILABLE,
        ErrorCode.SYMLINK_FAILED,
        ErrorCode.ENVIRONMENT_SETUP_FAILED,
        ErrorCode.SHELL_DETECTION_FAILED,
        ErrorCode.PERMISSION_DENIED,
        ErrorCode.DISK_SPACE_EXHAUSTED,
    }
)

_NETWORK_CODES = frozenset(
    {
        ErrorCode.NETWORK_UNAVAILABLE,
        ErrorCode.TIMEOUT_EXCEEDED,
        ErrorCode.SERVER_UNAVAILABLE,
        ErrorCode.DOWNLOAD_FAILED,
    }
)

_DEFAULT_SOLUTION = "Please check the error details and try again"

_SOLUTIONS: dict[ErrorCode, str] = {
    ErrorCode.INVALID_VERSION: (
        "Please use a valid Go version format (e.g., '1.21.0' or 'go1.21.0')"
    ),
    ErrorCode.MISSING_ARGUMENT: (
        "Please provide the required arguments. "
        "Use 'gopher help' for usage information"
    ),
    ErrorCode.VERSION_NOT_INSTALLED: (
        "Use 'gopher list' to see installed versions, "
        "or 'gopher install <version>' to install a version"
    ),
    ErrorCode.VERSION_ALREADY_INSTALLED: (
        "The version is already installed. Use 'gopher list' to see installed versions"
    ),
    ErrorCode.SYSTEM_GO_NOT_AVAILABLE: (
        "No system Go installation found. Install Go from the official downloads page "
        "or use 'gopher install <version>'"
    ),
    ErrorCode.PERMISSION_DENIED: (
        "Try running with elevated privileges "
        "(sudo on Unix, Run as Administrator on Windows)"
    ),
    ErrorCode.NETWORK_UNAVAILABLE: "Check your internet connection and try again",
    ErrorCode.TIMEOUT_EXCEEDED: (
        "The operation timed out. Try again with a better internet connection"
    ),
    ErrorCode.SYMLINK_FAILED: (
        "Symlink creation failed. You may need to enable Developer Mode on Windows "
        "or run with elevated privileges"
    ),
    ErrorCode.INVALID_ALIAS_NAME: (
        "Use only letters, numbers, hyphens, underscores, and dots. "
        "Avoid reserved names"
    ),
    ErrorCode.RESERVED_NAME: "Choose a different name that is not reserved by gopher",
    ErrorCode.UNKNOWN_CONFIG_OPTION: (
        "Use 'gopher config list' to see available configuration options"
    ),
}


class ErrorHandler:
    """Formats and classifies errors; ``verbose`` adds context and location."""

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose

    def handle_error(self, err: BaseException | None) -> str:
        """Return a user-friendly message for ``err`` (``""`` for None)."""
        if err is None:
            return ""
        if isinstance(err, GopherError):
            return self._format_gopher_error(err)
        if isinstance(err, FileNotFoundError):
            return "File or directory not found"
        if isinstance(err, PermissionError):
            return "Permission denied - you may need to run with elevated privileges"
        return str(err)

    def _format_gopher_error(self, err: GopherError) -> str:
        parts = [err.message]
        if err.details:
            parts.append(f"Details: {err.details}")
        if self.verbose and err.context:
            context = ", ".join(f"{key}={value}" for key, value in err.context.items())
            parts.append(f"Context: {context}")
        if self.verbose and err.file:
            parts.append(f"Location: {err.file}:{err.line}")
        return "\n".join(parts)

    def should_retry(self, err: BaseException | None) -> bool:
        """Return True when the failure is transient and worth retrying."""
        return isinstance(err, GopherError) and err.code in _RETRY_DELAYS

    def get_retry_delay(self, err: BaseException | None) -> int:
        """Return the suggested delay in seconds before a retry (0 for none)."""
        if isinstance(err, GopherError):
            return _RETRY_DELAYS.get(err.code, 0)
        return 0

    def is_user_error(self, err: BaseException | None) -> bool:
        """Return True when ``err`` was caused by user input."""
        return isinstance(err, GopherError) and err.code in _USER_CODES

    def is_system_error(self, err: BaseException | None) -> bool:
        """Return True when ``err`` was caused by the local system."""
        return isinstance(err, GopherError) and err.code in _SYSTEM_CODES

    def is_network_error(self, err: BaseException | None) -> bool:
        """Return True when ``err`` was caused by the network."""
        return isinstance(err, GopherError) and err.code in _NETWORK_CODES

    def get_error_category(self, err: BaseException | None) -> str:
        """Return a human-readable category for ``err``."""
        if self.is_user_error(err):
            return "User Input Error"
        if self.is_system_error(err):
            return "System Error"
        if self.is_network_error(err):
            return "Network Error"
        return "Unknown Error"

    def suggest_solution(self, err: BaseException | None) -> str:
        """Return advice on how to resolve ``err``."""
        if isinstance(err, GopherError):
            return _SOLUTIONS.get(err.code, _DEFAULT_SOLUTION)
        return _DEFAULT_SOLUTION