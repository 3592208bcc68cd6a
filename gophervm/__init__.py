"""Building blocks of a Go version manager: environment providers, structured errors, error handling, logging, recovery and validation."""

__version__ = "0.1.0"
__all__ = [
    "env",
    "errlog",
    "errors",
    "handler",
    "recovery",
    "validation",
]