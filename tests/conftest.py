"""Global configuration and fixtures for all pytest-based tests"""

import pytest

from tests.util.tasks import (
    SETTLER,
    decrement,
    deferred_double,
    deferred_increment,
    double,
    increment,
)


@pytest.fixture(name="arithmetic_tasks")
def get_arithmetic_tasks():
    """fresh list for every test, the generated functions keep a reference to it"""
    return [increment, double, decrement]


@pytest.fixture(name="mixed_tasks")
def get_mixed_tasks():
    """same arithmetic as arithmetic_tasks, partly deferred"""
    return [deferred_increment, deferred_double, decrement]


@pytest.fixture(autouse=True, scope="session")
def shut_down_thenable_settler():
    yield
    SETTLER.shutdown(wait=True)
