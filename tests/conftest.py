# tests/conftest.py
"""Global PyTest fixtures for the modcohesion test-suite."""

from __future__ import annotations

import pytest

from modcohesion.config import CohesionConfig
from modcohesion.context import VisitContext
from tests.helpers import make_context


@pytest.fixture
def config() -> CohesionConfig:
    """Default configuration: root ``Modules``, exemptions ``Facades`` and ``DTO``."""
    return CohesionConfig()


@pytest.fixture
def billing_context() -> VisitContext:
    """Context of a class in ``App\\Modules\\Billing\\Handlers`` with no imports."""
    return make_context()
