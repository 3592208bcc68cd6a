"""Validation of versions, alias names, config values, paths and commands."""

from __future__ import annotations

import re
from collections.abc import Sequence

from .errors import (
    ErrorCode,
    GopherError,
    invalid_format,
    invalid_version,
    missing_argument,
    reserved_name,
    unknown_config_option,
)

_VERSION_RE = re.compile(
    r"(\d+)\.(\d+)(?:\.(\d+))?(?:-([a-zA-Z0-9\-]+))?(?:\+([a-zA-Z0-9\-]+))?",
    re.ASCII,
)
_ALIAS_RE = re.compile(r"[a-zA-Z0-9\-_.]+")

_RESERVED_NAMES = frozenset(
    {
        "system", "sys", "install", "uninstall", "use", "list", "list-remote",
        "alias", "init", "setup", "status", "debug", "help", "version",
        "config", "env", "current", "switch", "remove", "delete", "add",
        "create", "update", "export", "import", "bulk",
    }
)

_GOPATH_MODES = ("shared", "version-specific", "custom")
_SHELLS = ("bash", "zsh", "fish", "powershell", "cmd")
_INVALID_PATH_CHARS = ("<", ">", '"', "|", "?", "*")
_SPECIAL_EDGE_CHARS = ("-", "_", ".")

_COMMANDS_REQUIRING_ARGS = {
    "install": "version",
    "uninstall": "version",
    "use": "version or alias",
    "show": "version",
    "set": "key=value",
    "alias": "subcommand",
    "env": "subcommand",
}


class Validator:
    """Validators that raise ``GopherError`` on bad input and return the value otherwise."""

    def validate_version(self, version: str) -> str:
        """Validate a Go version; return it without a leading ``go``."""
        if not version:
            raise GopherError(ErrorCode.INVALID_VERSION, "version cannot be empty")
        version = version.removeprefix("go")
        if not _VERSION_RE.fullmatch(version):
            raise invalid_version(version)
        parts = version.split(".")
        if len(parts) < 2:
            raise invalid_version(version)
        if parts[0] == "0" and parts[1] == "0":
            raise invalid_version(version)
        return version

    def validate_alias_name(self, name: str) -> str:
        """Validate an alias name and return it."""
        if not name:
            raise GopherError(ErrorCode.INVALID_ALIAS_NAME, "alias name cannot be empty")
        if len(name.encode("utf-8")) > 50:
            raise GopherError(
                ErrorCode.INVALID_ALIAS_NAME, "alias name cannot exceed 50 characters"
            )
        if name.lower() in _RESERVED_NAMES:
            raise reserved_name(name)
        if not _ALIAS_RE.fullmatch(name):
            raise GopherError(
                ErrorCode.INVALID_ALIAS_NAME,
                "alias name contains invalid characters. Only letters, numbers, "
                "hyphens, underscores, and dots are allowed",
            )
        if name.startswith(_SPECIAL_EDGE_CHARS):
            raise GopherError(
                ErrorCode.INVALID_ALIAS_NAME,
                "alias name cannot start with special characters",
            )
        if name.endswith(_SPECIAL_EDGE_CHARS):
            raise GopherError(
                ErrorCode.INVALID_ALIAS_NAME,
                "alias name cannot end with special characters",
            )
        return name

    def validate_config_value(self, key: str, value: str) -> str:
        """Validate ``value`` for the configuration option ``key`` and return it."""
        if key == "gopath_mode":
            if value in _GOPATH_MODES:
                return value
            raise GopherError(
                ErrorCode.INVALID_CONFIG_VALUE,
                f"gopath_mode must be one of: {', '.join(_GOPATH_MODES)}",
            )
        if key in ("set_environment", "auto_cleanup"):
            if value not in ("true", "false"):
                raise GopherError(
                    ErrorCode.INVALID_CONFIG_VALUE,
                    f"{key} must be 'true' or 'false'",
                )
            return value
        if key == "max_versions":
            if not value:
                raise GopherError(
                    ErrorCode.INVALID_CONFIG_VALUE, "max_versions cannot be empty"
                )
            return value
        if key == "mirror_url":
            if not value:
                raise GopherError(
                    ErrorCode.INVALID_CONFIG_VALUE, "mirror_url cannot be empty"
                )
            if not value.startswith(("http://", "https://")):
                raise GopherError(
                    ErrorCode.INVALID_CONFIG_VALUE,
                    "mirror_url must be a valid HTTP/HTTPS URL",
                )
            return value
        if key == "custom_gopath":
            if not value:
                raise GopherError(
                    ErrorCode.INVALID_CONFIG_VALUE,
                    "custom_gopath cannot be empty when gopath_mode is 'custom'",
                )
            return value
        raise unknown_config_option(key)

    def validate_path(self, path: str) -> str:
        """Validate a file or directory path and return it."""
        if not path:
            raise GopherError(ErrorCode.INVALID_ARGUMENT, "path cannot be empty")
        for char in _INVALID_PATH_CHARS:
            if char in path:
                raise GopherError(
                    ErrorCode.INVALID_ARGUMENT,
                    f"path contains invalid character: {char}",
                )
        colon = path.find(":")
        if colon != -1:
            # A colon is only allowed as a drive separator, followed by a slash.
            if colon == len(path) - 1 or path[colon + 1] not in ("\\", "/"):
                raise GopherError(
                    ErrorCode.INVALID_ARGUMENT, "path contains invalid character: :"
                )
        return path

    def validate_shell(self, shell: str) -> str:
        """Validate a shell name and return it."""
        if shell in _SHELLS:
            return shell
        raise GopherError(
            ErrorCode.INVALID_ARGUMENT,
            f"unsupported shell: {shell}. Supported shells: {', '.join(_SHELLS)}",
        )

    def validate_key_value_pair(self, key_value: str) -> tuple[str, str]:
        """Validate a ``key=value`` pair and return ``(key, value)``."""
        if not key_value:
            raise GopherError(ErrorCode.INVALID_FORMAT, "key=value pair cannot be empty")
        key, sep, value = key_value.partition("=")
        if not sep:
            raise invalid_format("key=value")
        if not key:
            raise GopherError(ErrorCode.INVALID_FORMAT, "key cannot be empty")
        if not value:
            raise GopherError(ErrorCode.INVALID_FORMAT, "value cannot be empty")
        return key, value

    def validate_command(self, command: str, args: Sequence[str]) -> str:
        """Check that ``command`` has the arguments it needs; return the command."""
        if not command:
            raise GopherError(ErrorCode.INVALID_ARGUMENT, "command cannot be empty")
        required = _COMMANDS_REQUIRING_ARGS.get(command)
        if required is not None and not args:
            raise missing_argument(f"{command} (requires {required})")
        return command


default_validator = Validator()


def validate_version(version: str) -> str:
    """Validate a Go version with the default validator."""
    return default_validator.validate_version(version)


def validate_alias_name(name: str) -> str:
    """Validate an alias name with the default validator."""
    return default_validator.validate_alias_name(name)


def validate_config_value(key: str, value: str) -> str:
    """Validate a configuration value with the default validator."""
    return default_validator.validate_config_value(key, value)


def validate_path(path: str) -> str:
    """Validate a path with the default validator."""
    return default_validator.validate_path(path)


def validate_shell(shell: str) -> str:
    """Validate a shell name with the default validator."""
    return default_validator.validate_shell(shell)


def validate_key_value_pair(key_value: str) -> tuple[str, str]:
    """Validate a ``key=value`` pair with the default validator."""
    return default_validator.validate_key_value_pair(key_value)


def validate_command(command: str, args: Sequence[str]) -> str:
    """Validate a command and its arguments with the default validator."""
    return default_validator.validate_command(command, args)