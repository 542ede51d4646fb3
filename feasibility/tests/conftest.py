"""Shared pytest fixtures."""

import pytest

from feasibility.tests.sample_data import make_balanced_plan, make_overloaded_plan


@pytest.fixture
def balanced_plan():
    """Plan scoring 100%."""
    return make_balanced_plan()


@pytest.fixture
def overloaded_plan():
    """Plan scoring 80% with movable low-priority activities on day 1."""
    return make_overloaded_plan()
