# tests/helpers/result_utils.py
"""Result type unwrapping utilities for modcohesion tests."""

from __future__ import annotations

from typing import TypeVar

from modcohesion.result import Failure, Result, Success

T = TypeVar("T")
E = TypeVar("E")


def expect_success(result: Result[T, E]) -> T:
    """Unwrap Success or fail the test with the error.

    Raises:
        AssertionError: If result is Failure
    """
    match result:
        case Success(value):
            return value
        case Failure(error):
            raise AssertionError(f"Unexpected failure: {error}")


def expect_failure(result: Result[T, E]) -> E:
    """Unwrap Failure or fail the test.

    Raises:
        AssertionError: If result is Success
    """
    match result:
        case Failure(error):
            return error
        case Success(value):
            raise AssertionError(f"Expected failure, got success: {value}")
