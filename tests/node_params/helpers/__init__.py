"""Test helpers for node parameter unit tests."""

from .builders import (
    EXISTING_DATABASE,
    FIRST_LAUNCH,
    make_spec_dict,
    make_user_defaults,
    write_spec_file,
)

__all__ = [
    "EXISTING_DATABASE",
    "FIRST_LAUNCH",
    "make_spec_dict",
    "make_user_defaults",
    "write_spec_file",
]
