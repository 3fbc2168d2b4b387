"""Helper utilities for pure, Result-based Pydantic validation."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from modcohesion.result import Failure, Result, Success


TModel = TypeVar("TModel", bound=BaseModel)

__all__: list[str] = ["validate_model"]


def validate_model(model_cls: type[TModel], **data: object) -> Result[TModel, ValidationError]:
    """
    Construct a Pydantic model and surface validation issues as a Result.

    Pydantic raises on invalid input; the exception is caught here, at the
    configuration boundary, and returned as a Failure so that callers stay
    expression-oriented while keeping Pydantic's error messages.
    """
    try:
        return Success(model_cls(**data))
    except ValidationError as exc:
        return Failure(exc)
