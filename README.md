# gophervm

Building blocks for a Go version manager:

- `gophervm.env` – environment-variable providers that can be swapped for tests
- `gophervm.errors` – `GopherError`, an exception carrying an `ErrorCode`, plus constructors for common failures
- `gophervm.handler` – `ErrorHandler`, which turns errors into user-facing messages, categories and advice
- `gophervm.errlog` – `ErrorLogger`, level-filtered logging of errors to a text stream
- `gophervm.recovery` – `Recoverer` and context managers that convert unexpected exceptions into `GopherError`
- `gophervm.validation` – validators for Go versions, alias names, config values, paths, shells and commands

The package has no dependencies beyond the standard library.

## Installation

```
pip install gophervm
```

## Environment providers

```python
from gophervm.env import DefaultProvider, MockProvider

DefaultProvider().getenv("HOME")          # read from os.environ, "" when unset

env = MockProvider({"GOPATH": "/work/go"})
env.getenv("GOPATH")                      # "/work/go"
env.setenv("GOPROXY", "direct")
env.clear()                               # every lookup now returns ""
```

`EnvProvider` is the protocol both classes satisfy.

## Errors

```python
from gophervm.errors import ErrorCode, GopherError, wrap, version_not_installed, get_error_code

err = version_not_installed("1.21.0")
str(err)                # "VERSION_NOT_INSTALLED: version 1.21.0 is not installed"

err = wrap(OSError("disk full"), ErrorCode.INSTALLATION_FAILED, "installation failed")
str(err)                # "INSTALLATION_FAILED: installation failed: disk full"

err.with_context("version", "1.21.0").with_details("while extracting")
get_error_code(ValueError("x"))   # ErrorCode.UNKNOWN
```

Each `GopherError` records the file and line where it was created.

## Handling errors

```python
from gophervm.handler import ErrorHandler

handler = ErrorHandler(verbose=True)
handler.handle_error(err)          # message, details, and in verbose mode context and location
handler.get_error_category(err)    # "User Input Error", "System Error", "Network Error" or "Unknown Error"
handler.should_retry(err)          # True for network, timeout and server errors
handler.get_retry_delay(err)       # 5, 10 or 30 seconds for those, else 0
handler.suggest_solution(err)
```

## Logging

```python
import sys
from gophervm.errlog import ErrorLogger, LogLevel

logger = ErrorLogger(LogLevel.WARN, stream=sys.stdout)
logger.log_error(err, {"command": "install"})
logger.log_gopher_error(err)
logger.log_message(LogLevel.ERROR, "failed after %d attempts", 3)
```

Errors are logged at a level chosen from their code; lines below the logger's level
are dropped. The module-level `log_error`, `log_message` and `log_gopher_error`
write to stderr through a default logger at `INFO`.

## Recovery

```python
from gophervm.recovery import recover, Recoverer, must_value

with recover() as scope:
    raise ValueError("boom")
scope.error.code          # ErrorCode.UNKNOWN, message "panic occurred: boom"

Recoverer().safe_execute(lambda: 1 / 0)   # raises GopherError; GopherErrors pass through unchanged
```

`recover_with_handler(logger, handler)` and `Recoverer.recover_with_handler(handler)`
call `handler` with the recovered error. `must(err)` raises `err` if it is not None;
`must_value(value, err)` does the same and otherwise returns `value`.

## Validation

Validators raise `GopherError` on bad input and return the value otherwise:

```python
from gophervm.validation import validate_version, validate_alias_name, validate_key_value_pair
from gophervm.errors import GopherError, ErrorCode

validate_version("go1.21.0")               # "1.21.0"
validate_key_value_pair("key=a=b")         # ("key", "a=b")

try:
    validate_alias_name("system")
except GopherError as err:
    assert err.code is ErrorCode.RESERVED_NAME
```

Also available: `validate_config_value(key, value)`, `validate_path(path)`,
`validate_shell(shell)` and `validate_command(command, args)`, and the same methods on
a `Validator` instance.

## What this package does not do

It does not read or write a configuration file, does not compare or order Go version
strings, and does not look up, download or verify Go release archives. It installs
nothing and offers no command-line program; it provides the error, validation, logging
and environment pieces such a tool is built on.

## Running the tests

```
pip install -e .[test]
pytest
```