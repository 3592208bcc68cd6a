"""Structured error type with codes and common constructors."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Identifiers for the kinds of failure the tool reports."""

    # Validation
    INVALID_VERSION = "INVALID_VERSION"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_FORMAT = "INVALID_FORMAT"
    MISSING_ARGUMENT = "MISSING_ARGUMENT"
    INVALID_ALIAS_NAME = "INVALID_ALIAS_NAME"
    RESERVED_NAME = "RESERVED_NAME"

    # Installation
    VERSION_NOT_INSTALLED = "VERSION_NOT_INSTALLED"
    VERSION_ALREADY_INSTALLED = "VERSION_ALREADY_INSTALLED"
    INSTALLATION_FAILED = "INSTALLATION_FAILED"
    UNINSTALLATION_FAILED = "UNINSTALLATION_FAILED"
    DOWNLOAD_FAILED = "DOWNLOAD_FAILED"
    EXTRACTION_FAILED = "EXTRACTION_FAILED"

    # System
    SYSTEM_GO_NOT_AVAILABLE = "SYSTEM_GO_NOT_AVAILABLE"
    SYMLINK_FAILED = "SYMLINK_FAILED"
    ENVIRONMENT_SETUP_FAILED = "ENVIRONMENT_SETUP_FAILED"
    SHELL_DETECTION_FAILED = "SHELL_DETECTION_FAILED"

    # Configuration
    CONFIG_LOAD_FAILED = "CONFIG_LOAD_FAILED"
    CONFIG_SAVE_FAILED = "CONFIG_SAVE_FAILED"
    INVALID_CONFIG_VALUE = "INVALID_CONFIG_VALUE"
    UNKNOWN_CONFIG_OPTION = "UNKNOWN_CONFIG_OPTION"

    # Aliases
    ALIAS_ALREADY_EXISTS = "ALIAS_ALREADY_EXISTS"
    ALIAS_NOT_FOUND = "ALIAS_NOT_FOUND"
    ALIAS_LOAD_FAILED = "ALIAS_LOAD_FAILED"
    ALIAS_SAVE_FAILED = "ALIAS_SAVE_FAILED"
    ALIAS_UPDATE_FAILED = "ALIAS_UPDATE_FAILED"
    ALIAS_REMOVE_FAILED = "ALIAS_REMOVE_FAILED"

    # File system
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    DIRECTORY_NOT_FOUND = "DIRECTORY_NOT_FOUND"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    DISK_SPACE_EXHAUSTED = "DISK_SPACE_EXHAUSTED"

    # Network
    NETWORK_UNAVAILABLE = "NETWORK_UNAVAILABLE"
    TIMEOUT_EXCEEDED = "TIMEOUT_EXCEEDED"
    SERVER_UNAVAILABLE = "SERVER_UNAVAILABLE"

    # Generic
    UNKNOWN = "UNKNOWN_ERROR"
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"
    OPERATION_CANCELLED = "OPERATION_CANCELLED"

    def __str__(self) -> str:
        return self.value


def _caller_location() -> tuple[str, int]:
    """Return file and line of the first frame outside this module."""
    frame = sys._getframe(1)
    while frame is not None and frame.f_code.co_filename == __file__:
        frame = frame.f_back
    if frame is None:
        return "", 0
    return frame.f_code.co_filename, frame.f_lineno


class GopherError(Exception):
    """An error carrying a code, a message and optional context."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        wrapped: BaseException | None = None,
        details: str = "",
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = ErrorCode(code)
        self.message = message
        self.wrapped = wrapped
        self.details = details
        self.context: dict[str, Any] = dict(context or {})
        self.file, self.line = _caller_location()
        if wrapped is not None:
            self.__cause__ = wrapped

    def __str__(self) -> str:
        if self.wrapped is not None:
            return f"{self.code.value}: {self.message}: {self.wrapped}"
        return f"{self.code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"GopherError({self.code.value!r}, {self.message!r})"

    def with_context(self, key: str, value: Any) -> GopherError:
        """Attach a context entry and return this error."""
        self.context[key] = value
        return self

    def with_details(self, details: str) -> GopherError:
        """Set the detail text and return this error."""
        self.details = details
        return self


def wrap(err: BaseException | None, code: ErrorCode, message: str) -> GopherError:
    """Wrap ``err`` in a new ``GopherError``."""
    return GopherError(code, message, wrapped=err)


def is_gopher_error(err: BaseException | None) -> bool:
    """Return True if ``err`` is a ``GopherError``."""
    return isinstance(err, GopherError)


def get_error_code(err: BaseException | None) -> ErrorCode:
    """Return the code of ``err``, or ``ErrorCode.UNKNOWN`` for other errors."""
    if isinstance(err, GopherError):
        return err.code
    return ErrorCode.UNKNOWN


def is_error_code(err: BaseException | None, code: ErrorCode) -> bool:
    """Return True if ``err`` carries ``code``."""
    return get_error_code(err) == code


# Validation


def invalid_version(version: str) -> GopherError:
    return GopherError(ErrorCode.INVALID_VERSION, f"invalid version format: {version}")


def missing_argument(command: str) -> GopherError:
    return GopherError(
        ErrorCode.MISSING_ARGUMENT, f"{command} command requires additional arguments"
    )


def invalid_format(expected: str) -> GopherError:
    return GopherError(ErrorCode.INVALID_FORMAT, f"invalid format: expected {expected}")


def invalid_alias_name(name: str) -> GopherError:
    return GopherError(ErrorCode.INVALID_ALIAS_NAME, f"invalid alias name: {name}")


def reserved_name(name: str) -> GopherError:
    return GopherError(ErrorCode.RESERVED_NAME, f"name '{name}' is reserved")


# Installation


def version_not_installed(version: str) -> GopherError:
    return GopherError(
        ErrorCode.VERSION_NOT_INSTALLED, f"version {version} is not installed"
    )


def version_already_installed(version: str) -> GopherError:
    return GopherError(
        ErrorCode.VERSION_ALREADY_INSTALLED, f"version {version} is already installed"
    )


def installation_failed(version: str, err: BaseException | None) -> GopherError:
    return wrap(err, ErrorCode.INSTALLATION_FAILED, f"failed to install version {version}")


def download_failed(version: str, err: BaseException | None) -> GopherError:
    return wrap(err, ErrorCode.DOWNLOAD_FAILED, f"failed to download version {version}")


# System


def system_go_not_available() -> GopherError:
    return GopherError(ErrorCode.SYSTEM_GO_NOT_AVAILABLE, "system Go is not available")


def symlink_failed(target: str, link: str, err: BaseException | None) -> GopherError:
    return wrap(
        err,
        ErrorCode.SYMLINK_FAILED,
        f"failed to create symlink from {target} to {link}",
    )


# Configuration


def config_load_failed(path: str, err: BaseException | None) -> GopherError:
    return wrap(
        err, ErrorCode.CONFIG_LOAD_FAILED, f"failed to load configuration from {path}"
    )


def config_save_failed(path: str, err: BaseException | None) -> GopherError:
    return wrap(
        err, ErrorCode.CONFIG_SAVE_FAILED, f"failed to save configuration to {path}"
    )


def unknown_config_option(option: str) -> GopherError:
    return GopherError(
        ErrorCode.UNKNOWN_CONFIG_OPTION, f"unknown configuration option: {option}"
    )


# File system


def file_not_found(path: str) -> GopherError:
    return GopherError(ErrorCode.FILE_NOT_FOUND, f"file not found: {path}")


def directory_not_found(path: str) -> GopherError:
    return GopherError(ErrorCode.DIRECTORY_NOT_FOUND, f"directory not found: {path}")


def alias_not_found(name: str) -> GopherError:
    return GopherError(ErrorCode.ALIAS_NOT_FOUND, f"alias not found: {name}")


def permission_denied(path: str) -> GopherError:
    return GopherError(ErrorCode.PERMISSION_DENIED, f"permission denied: {path}")


# Network


def network_unavailable(err: BaseException | None) -> GopherError:
    return wrap(err, ErrorCode.NETWORK_UNAVAILABLE, "network unavailable")


def timeout_exceeded(operation: str) -> GopherError:
    return GopherError(
        ErrorCode.TIMEOUT_EXCEEDED, f"timeout exceeded for operation: {operation}"
    )


# Generic


def not_implemented(feature: str) -> GopherError:
    return GopherError(ErrorCode.NOT_IMPLEMENTED, f"feature not implemented: {feature}")


def operation_cancelled(operation: str) -> GopherError:
    return GopherError(ErrorCode.OPERATION_CANCELLED, f"operation cancelled: {operation}")