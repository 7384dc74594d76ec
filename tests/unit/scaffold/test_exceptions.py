"""
Scaffold error hierarchy tests
"""

import errno

from mlscaffold.scaffold.exceptions import (
    ConfigError,
    EntryCreationError,
    InvalidNameError,
    InvalidPathError,
    RootAlreadyExistsError,
    ScaffoldError,
)


def test_all_errors_share_base_class():
    for error_class in (InvalidNameError, InvalidPathError, RootAlreadyExistsError, EntryCreationError, ConfigError):
        assert issubclass(error_class, ScaffoldError)


def test_phase_prefix_in_message():
    error = ScaffoldError("something broke", phase="logs")
    assert str(error) == "[logs] something broke"
    assert str(ScaffoldError("plain")) == "plain"


def test_entry_creation_error_uses_strerror():
    original = PermissionError(errno.EACCES, "Permission denied")
    error = EntryCreationError("logs/logs.log", original, phase="logs")

    assert error.reason == "Permission denied"
    assert error.original_error is original
    assert str(error) == "[logs] Failed to create logs/logs.log: Permission denied"


def test_entry_creation_error_without_strerror():
    error = EntryCreationError("main.py", OSError("disk full"))
    assert error.reason == "disk full"


def test_invalid_name_message():
    error = InvalidNameError("my project")
    assert "'my project'" in str(error)
    assert error.name == "my project"
