"""
Shared pytest fixtures for viclsm tests.

This module provides:
- Tolerance settings for floating-point comparisons
- ModelOptions fixtures with frozen soil enabled and disabled
- Logging reset between tests that reconfigure output
"""

import logging
from typing import Dict

import pytest
import structlog

from viclsm.config import ModelOptions


# =============================================================================
# Tolerance Settings
# =============================================================================

DEFAULT_RTOL = 0.01  # 1% relative tolerance
DEFAULT_ATOL = 1e-6  # Absolute tolerance for near-zero values


@pytest.fixture
def tolerance() -> Dict[str, float]:
    """Default tolerance settings for floating-point comparisons."""
    return {"rtol": DEFAULT_RTOL, "atol": DEFAULT_ATOL}


# =============================================================================
# Options Fixtures
# =============================================================================


@pytest.fixture
def frozen_options() -> ModelOptions:
    """Options with frozen soil physics enabled."""
    return ModelOptions(frozen_soil=True)


@pytest.fixture
def thawed_options() -> ModelOptions:
    """Options with frozen soil physics disabled."""
    return ModelOptions(frozen_soil=False)


@pytest.fixture(params=[True, False], ids=["frozen", "thawed"])
def any_options(request) -> ModelOptions:
    """Both settings of FROZEN_SOIL."""
    return ModelOptions(frozen_soil=request.param)


# =============================================================================
# Logging
# =============================================================================


def _restore_logging_defaults():
    root_logger = logging.getLogger("viclsm")
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)
    root_logger.addHandler(logging.NullHandler())
    root_logger.setLevel(logging.NOTSET)
    structlog.reset_defaults()


@pytest.fixture
def reset_logging():
    """Restore logging and structlog defaults after the test."""
    yield
    _restore_logging_defaults()


@pytest.fixture
def unconfigured_logging():
    """Run the test as if configure_logging had never been called."""
    _restore_logging_defaults()
    yield
    _restore_logging_defaults()
