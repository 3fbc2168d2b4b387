# tests/helpers/__init__.py
"""Shared test utilities for the modcohesion test suite."""

from __future__ import annotations

from tests.helpers.factories import make_code_base, make_context
from tests.helpers.result_utils import E, T, expect_failure, expect_success

__all__ = [
    "expect_success",
    "expect_failure",
    "T",
    "E",
    "make_context",
    "make_code_base",
]
